"""Handler builder responsible for creating the preview handler components."""

import logging
from typing import Any, Optional

from pdf_preview.aws_client.clients import get_s3_client
from pdf_preview.config import Settings, settings
from pdf_preview.fetcher.pdf_fetcher import PdfFetcher
from pdf_preview.orchestration.preview_handler import PdfPreviewHandler
from pdf_preview.page_processor.image_converter import ImageConverter
from pdf_preview.page_processor.s3_image_service import S3ImageService

logger = logging.getLogger(__name__)


def build_handler(s3_client: Optional[Any] = None, config: Optional[Settings] = None) -> PdfPreviewHandler:
    """Constructs the preview handler with all its dependencies.

    This acts as the composition root for the function.

    Args:
        s3_client: S3 client to upload with. A new client is created when omitted.
        config: Settings to use instead of the process-wide settings.

    Returns:
        PdfPreviewHandler: A fully configured handler.
    """
    config = config or settings
    s3_client = s3_client or get_s3_client(config)

    image_service = S3ImageService(
        s3_client=s3_client,
        bucket=config.S3_BUCKET_NAME,
        key_prefix=config.S3_KEY_PREFIX,
        content_type=config.IMAGE_CONTENT_TYPE,
        acl=config.S3_OBJECT_ACL,
        public_url_template=config.S3_PUBLIC_URL_TEMPLATE,
    )
    logger.debug(f"Preview handler built for bucket '{config.S3_BUCKET_NAME}' in region '{config.AWS_REGION}'")

    return PdfPreviewHandler(
        fetcher=PdfFetcher(timeout=config.HTTP_TIMEOUT_SECONDS),
        converter=ImageConverter(dpi=config.RENDER_DPI),
        image_service=image_service,
    )
