"""AWS client configuration for the PDF preview function."""

from typing import Optional

import boto3

from pdf_preview.config import Settings, settings


def get_s3_client(config: Optional[Settings] = None):
    """Creates and returns a boto3 S3 client configured for either local or AWS environments.

    If the LOCAL_DEVELOPMENT_MODE setting is true, the client is configured to connect to a
    local S3-compatible endpoint (e.g., LocalStack) with test credentials. Otherwise the client
    resolves credentials through the default chain (the Lambda execution role when deployed)
    and targets the configured region.

    The client is safe to share between invocations and threads, so callers create it once
    per process.

    Args:
        config (Settings, optional): Settings to use instead of the process-wide settings.

    Returns:
        boto3.client: A configured boto3 S3 client instance.
    """
    config = config or settings

    if config.LOCAL_DEVELOPMENT_MODE:
        return boto3.client(
            "s3",
            endpoint_url=config.LOCALSTACK_ENDPOINT_URL,
            aws_access_key_id="test",
            aws_secret_access_key="test",
            region_name=config.AWS_REGION,
        )
    return boto3.client("s3", region_name=config.AWS_REGION)
