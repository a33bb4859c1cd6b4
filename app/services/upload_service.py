"""
Upload authorization service using S3 presigned POSTs

The browser uploads image bytes straight to the bucket; this service only
issues the short-lived authorization and tells the caller where the object
will be readable afterwards.
"""

from typing import Optional
from uuid import uuid4

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.core.exceptions import BadRequestError, StorageError
from app.core.logging import log
from app.schemas.upload import PresignRequest, PresignResponse
from app.utils.normalization import file_extension, slugify


class UploadService:
    """Issues presigned POST authorizations for image uploads"""

    def __init__(self, client=None, bucket_name: Optional[str] = None):
        self._client = client
        self.bucket_name = bucket_name or settings.aws_s3_bucket
        self.max_size_bytes = settings.upload_max_size_mb * 1024 * 1024
        self.expires_in = settings.upload_expires_seconds

    @property
    def client(self):
        if self._client is None:
            self._client = boto3.client(
                "s3",
                region_name=settings.aws_region,
                aws_access_key_id=settings.aws_access_key_id,
                aws_secret_access_key=settings.aws_secret_access_key,
                config=Config(signature_version="s3v4"),
            )
        return self._client

    def build_key(self, filename: str, brand_name: Optional[str] = None, folder: Optional[str] = None) -> str:
        """
        Storage key for an upload:
        - <folder>/<brand-slug>-<random>.<ext> when a brand name is given
        - <folder>/<random>.<ext> otherwise
        """
        folder = (folder or settings.upload_default_folder).strip("/")
        unique = uuid4().hex
        stem = unique
        if brand_name:
            slug = slugify(brand_name)
            stem = f"{slug}-{unique}" if slug else unique

        ext = file_extension(filename)
        name = f"{stem}.{ext}" if ext else stem
        return f"{folder}/{name}"

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{settings.aws_region}.amazonaws.com/{key}"

    def create_presigned_post(self, request: PresignRequest) -> PresignResponse:
        if not request.filename or not request.content_type:
            raise BadRequestError("Missing required fields", details="Filename and content type are required")

        if not self.bucket_name:
            log.error("AWS_S3_BUCKET is not configured")
            raise StorageError(
                "Failed to generate upload URL",
                details="AWS_S3_BUCKET environment variable is not set",
            )

        key = self.build_key(request.filename, request.brand_name, request.folder)

        try:
            presigned = self.client.generate_presigned_post(
                Bucket=self.bucket_name,
                Key=key,
                Fields={"Content-Type": request.content_type},
                Conditions=[
                    ["content-length-range", 0, self.max_size_bytes],
                    {"Content-Type": request.content_type},
                ],
                ExpiresIn=self.expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            log.error("Error creating presigned POST", key=key, error=str(e))
            raise StorageError("Failed to generate upload URL", details=str(e))

        log.info("Issued upload authorization", key=key, content_type=request.content_type)

        return PresignResponse(
            url=presigned["url"],
            fields={**presigned["fields"], "key": key},
            public_url=self.public_url(key),
        )
