"""Exceptions raised while turning a PDF URL into a preview image."""


class PdfPreviewError(Exception):
    """Base exception for preview failures."""


class MalformedRequestError(PdfPreviewError):
    """Raised when the request body is not valid JSON or lacks a usable url."""


class FetchOrRenderError(PdfPreviewError):
    """Raised when the PDF cannot be downloaded or its first page cannot be rendered."""


class UploadError(PdfPreviewError):
    """Raised when the rendered image cannot be encoded or stored in S3."""
