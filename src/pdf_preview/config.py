"""Configuration settings for the PDF preview function."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Order of priority for pydantic-settings:
#
# 1. Arguments to the Initializer (Highest Priority - mostly used in tests):
#    e.g. Settings(S3_BUCKET_NAME="other-bucket")
#
# 2. System Environment Variables:
#    On Lambda these come from the function configuration.
#    Example: export RENDER_DPI=150 before running the runner.
#
# 3. .env File Values:
#    If the .env file exists at the project root it is read (local dev only).
#
# 4. Default Values in the Class (Lowest Priority).

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):  # type: ignore
    """Configuration settings for the PDF preview function."""

    model_config = SettingsConfigDict(
        # Only load .env if it exists (local dev)
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # -- AWS --
    AWS_REGION: str = "sa-east-1"
    S3_BUCKET_NAME: str = "alfreddev"
    S3_KEY_PREFIX: str = "images/"
    S3_OBJECT_ACL: str = "public-read"
    # Virtual-hosted style URL; must match how the bucket is actually served.
    S3_PUBLIC_URL_TEMPLATE: str = "https://{bucket}.s3.amazonaws.com/{key}"

    # Example (localstack):
    #   LOCAL_DEVELOPMENT_MODE=true
    #   LOCALSTACK_ENDPOINT_URL="http://localhost:4566"
    LOCAL_DEVELOPMENT_MODE: bool = False
    LOCALSTACK_ENDPOINT_URL: str = "http://localhost:4566"

    # -- Rendering --
    IMAGE_CONTENT_TYPE: str = "image/png"
    RENDER_DPI: int = 100

    # -- HTTP fetch --
    # Unset means no client-side timeout; the Lambda invocation timeout bounds the request.
    HTTP_TIMEOUT_SECONDS: Optional[float] = None

    LOG_LEVEL: str = "INFO"


settings = Settings()
