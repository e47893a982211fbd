"""Renders the first page of a PDF to an image."""

import logging

from pdf2image import convert_from_bytes
from pdf2image.exceptions import PDFInfoNotInstalledError, PDFPageCountError, PDFPopplerTimeoutError, PDFSyntaxError

from pdf_preview.exceptions import FetchOrRenderError

logger = logging.getLogger(__name__)

FIRST_PAGE = 1


class ImageConverter:
    """Converts PDF bytes to an image of the first page at a fixed resolution."""

    def __init__(self, dpi: int):
        """Initializes the ImageConverter.

        Args:
            dpi (int): Resolution used to rasterize the page.
        """
        self.dpi = dpi

    def first_page_to_image(self, pdf_bytes: bytes):
        """Converts the first page of a PDF (provided as bytes) into an image object.

        Only page 1 is handed to poppler, so later pages are never rendered.

        Args:
            pdf_bytes (bytes): The PDF file data in bytes.

        Returns:
            PIL.Image.Image: The rendered first page.

        Raises:
            FetchOrRenderError: If the data is not a readable PDF, is encrypted or empty, or
                poppler is unavailable.
        """
        logger.info(f"Rendering page {FIRST_PAGE} at {self.dpi} DPI")
        try:
            images = convert_from_bytes(pdf_bytes, dpi=self.dpi, first_page=FIRST_PAGE, last_page=FIRST_PAGE)
        except (PDFPageCountError, PDFSyntaxError, PDFPopplerTimeoutError, PDFInfoNotInstalledError) as e:
            raise FetchOrRenderError(f"Failed to render PDF: {e}") from e
        except Exception as e:
            raise FetchOrRenderError(f"Unexpected error while rendering PDF: {e}") from e

        if not images:
            raise FetchOrRenderError("PDF rendering produced no pages")

        image = images[0]
        logger.info(f"Rendered page {FIRST_PAGE}: {image.size[0]}x{image.size[1]} pixels")
        return image
