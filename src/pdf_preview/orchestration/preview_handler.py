"""Orchestration of a single preview request: parse -> fetch -> render -> upload -> respond."""

import json
import logging
from typing import Any, Dict, Optional

from pdf_preview.custom_logging.log_context import request_id_context
from pdf_preview.exceptions import FetchOrRenderError, MalformedRequestError, UploadError
from pdf_preview.fetcher.pdf_fetcher import PdfFetcher
from pdf_preview.page_processor.image_converter import ImageConverter
from pdf_preview.page_processor.s3_image_service import S3ImageService
from pdf_preview.request.schemas import parse_request_body

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error processing PDF"


def create_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Builds an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
        "isBase64Encoded": False,
    }


class PdfPreviewHandler:
    """Turns a request for a PDF URL into a public URL of its first page as PNG."""

    def __init__(self, fetcher: PdfFetcher, converter: ImageConverter, image_service: S3ImageService):
        """Initializes the handler with injected dependencies.

        Args:
            fetcher: Downloads the PDF.
            converter: Renders the first page.
            image_service: Encodes and uploads the rendered page.
        """
        self.fetcher = fetcher
        self.converter = converter
        self.image_service = image_service

    def handle(self, event: Dict[str, Any], request_id: Optional[str] = None) -> Dict[str, Any]:
        """Runs the full preview flow for one invocation.

        Every failure is flattened into the same 500 response; which step failed is only
        recorded in the logs.

        Args:
            event: The API Gateway proxy event carrying the JSON body.
            request_id: Identifier of the invocation, prefixed to log lines.

        Returns:
            dict: The proxy response.
        """
        token = request_id_context.set(request_id)
        logger.info("Request received.")
        try:
            pdf_request = parse_request_body(event)
            url = str(pdf_request.url)

            pdf_bytes = self.fetcher.fetch(url)
            image = self.converter.first_page_to_image(pdf_bytes)
            result = self.image_service.upload_image(image)

            logger.info(f"Preview ready at {result.image_url} ({result.width}x{result.height})")
            return create_response(200, {"imageUrl": result.image_url})
        except MalformedRequestError as e:
            logger.error(f"Malformed request: {e}")
        except FetchOrRenderError as e:
            logger.error(f"Fetch or render failed: {e}")
        except UploadError as e:
            logger.error(f"Upload failed: {e}")
        except Exception as e:
            logger.critical(f"An unexpected error occurred while processing the request: {e}", exc_info=True)
        finally:
            request_id_context.reset(token)
        return create_response(500, {"error": ERROR_MESSAGE})
