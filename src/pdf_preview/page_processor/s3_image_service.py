"""Service class for storing rendered page images in S3."""

import io
import logging
import uuid
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from pdf_preview.exceptions import UploadError

logger = logging.getLogger(__name__)

IMAGE_FORMAT = "PNG"


@dataclass
class ImageUploadResult:
    """Represents the result of uploading a page image to S3.

    Attributes:
        s3_key (str): The S3 object key for the uploaded image.
        image_url (str): The public URL of the uploaded image.
        width (int): The width of the uploaded image in pixels.
        height (int): The height of the uploaded image in pixels.
    """

    s3_key: str
    image_url: str
    width: int
    height: int


class S3ImageService:
    """Handles encoding and publishing of preview images."""

    def __init__(
        self,
        s3_client: Any,
        bucket: str,
        key_prefix: str,
        content_type: str,
        acl: str,
        public_url_template: str,
    ):
        """Initialize the S3ImageService.

        Args:
            s3_client (Any): The S3 client instance, shared across invocations.
            bucket (str): The S3 bucket receiving the images.
            key_prefix (str): Prefix prepended to every generated key, e.g. ``images/``.
            content_type (str): Content type stored with the object.
            acl (str): Canned ACL applied to the object, e.g. ``public-read``.
            public_url_template (str): Format string with ``{bucket}`` and ``{key}`` placeholders.
        """
        self.s3_client = s3_client
        self.bucket = bucket
        self.key_prefix = key_prefix
        self.content_type = content_type
        self.acl = acl
        self.public_url_template = public_url_template

    def generate_key(self) -> str:
        """Returns a fresh object key; every call yields a different key."""
        return f"{self.key_prefix}{uuid.uuid4()}.{IMAGE_FORMAT.lower()}"

    def public_url(self, s3_key: str) -> str:
        """Builds the public URL of an object from the configured convention.

        The URL is not confirmed against S3, so the template must match how the bucket is served.
        """
        return self.public_url_template.format(bucket=self.bucket, key=s3_key)

    def upload_image(self, image: Any) -> ImageUploadResult:
        """Encodes an image as PNG and uploads it under a newly generated key.

        The object is assumed to be readable at its public URL as soon as ``put_object``
        returns.

        Args:
            image (PIL.Image.Image): The rendered page.

        Raises:
            UploadError: If the image cannot be encoded or S3 rejects the write.

        Returns:
            ImageUploadResult: The key, public URL and dimensions of the stored image.
        """
        try:
            buf = io.BytesIO()
            image.save(buf, format=IMAGE_FORMAT)
        except (OSError, ValueError) as e:
            raise UploadError(f"Failed to encode image as {IMAGE_FORMAT}: {e}") from e

        s3_key = self.generate_key()
        self._put_object(buf.getvalue(), s3_key)

        width, height = image.size
        image_url = self.public_url(s3_key)
        logger.info(f"Image uploaded successfully. Bucket='{self.bucket}', Key='{s3_key}'")
        return ImageUploadResult(s3_key, image_url, width, height)

    def _put_object(self, body: bytes, s3_key: str) -> None:
        """Uploads a single object to S3. No retry is attempted.

        Args:
            body (bytes): The encoded image.
            s3_key (str): The S3 object key for the uploaded image.

        Raises:
            UploadError: If the upload fails.
        """
        logger.info(f"Uploading {len(body)} bytes to S3. Bucket='{self.bucket}', Key='{s3_key}'")
        try:
            self.s3_client.put_object(
                Bucket=self.bucket,
                Key=s3_key,
                Body=body,
                ContentType=self.content_type,
                ACL=self.acl,
            )
        except (ClientError, BotoCoreError) as e:
            raise UploadError(f"Failed to upload image to S3. Bucket='{self.bucket}', Key='{s3_key}': {e}") from e
