"""AWS Lambda entry point.

The handler and its S3 client are built once per process at cold start and reused by every
invocation served by that process.
"""

from pdf_preview.custom_logging.log_context import setup_logging
from pdf_preview.handler_builder import build_handler

setup_logging()

preview_handler = build_handler()


def lambda_handler(event, context):
    """Lambda handler for API Gateway proxy events carrying ``{"url": "..."}``."""
    request_id = getattr(context, "aws_request_id", None)
    return preview_handler.handle(event, request_id=request_id)
