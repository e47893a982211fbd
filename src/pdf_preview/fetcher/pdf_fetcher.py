"""Downloads PDF documents over HTTP."""

import logging
from typing import Optional

import requests

from pdf_preview.exceptions import FetchOrRenderError

logger = logging.getLogger(__name__)


class PdfFetcher:
    """Fetches the raw bytes of a PDF from a URL with a single blocking GET."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initializes the PdfFetcher.

        Args:
            session (requests.Session, optional): Session used for the request. Defaults to the
                module-level ``requests`` functions.
            timeout (float, optional): Seconds to wait for the server. None waits indefinitely.
        """
        self.session = session
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """Downloads the document at ``url``.

        The response is used as a context manager so the connection goes back to the pool
        (or is closed) whether the download succeeds or fails.

        Args:
            url (str): The http(s) URL of the PDF.

        Raises:
            FetchOrRenderError: If the server is unreachable, answers with a non-2xx status,
                or returns an empty body.

        Returns:
            bytes: The response body.
        """
        logger.info(f"Downloading PDF from '{url}'")
        get = self.session.get if self.session is not None else requests.get
        try:
            with get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                content = response.content
        except requests.exceptions.RequestException as e:
            raise FetchOrRenderError(f"Failed to download PDF from '{url}': {e}") from e

        if not content:
            raise FetchOrRenderError(f"Empty response body from '{url}'")

        logger.info(f"Downloaded {len(content)} bytes from '{url}'")
        return content
