"""Local runner that invokes the preview handler with an API Gateway-shaped event."""

import argparse
import json
import logging
import sys
import uuid

from pdf_preview.custom_logging.log_context import setup_logging
from pdf_preview.handler_builder import build_handler

setup_logging()
logger = logging.getLogger(__name__)


def build_event(pdf_url: str) -> dict:
    """Wraps a PDF URL in a minimal API Gateway proxy event."""
    return {
        "httpMethod": "POST",
        "body": json.dumps({"url": pdf_url}),
        "isBase64Encoded": False,
    }


def main(argv=None) -> int:
    """Main entry point for the local runner."""
    parser = argparse.ArgumentParser(description="Render the first page of a PDF and upload it to S3.")
    parser.add_argument("url", help="URL of the PDF document")
    args = parser.parse_args(argv)

    logger.info("Preview runner started.")
    handler = build_handler()
    response = handler.handle(build_event(args.url), request_id=f"local-{uuid.uuid4()}")
    print(json.dumps(response, indent=2))

    if response["statusCode"] != 200:
        logger.error("Preview runner finished with an error response.")
        return 1
    logger.info("Preview runner finished successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
