"""
Tests for the upload service
"""
import re

import pytest
from botocore.exceptions import ClientError

from app.core.exceptions import BadRequestError, StorageError
from app.schemas.upload import PresignRequest
from app.services.upload_service import UploadService


class _FailingClient:
    def generate_presigned_post(self, **kwargs):
        raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GeneratePresignedPost")


class TestBuildKey:

    def test_default_folder(self, upload_service):
        assert re.fullmatch(r"logos/toyota-[0-9a-f]{32}\.png", upload_service.build_key("a.png", "Toyota"))

    def test_custom_folder_is_trimmed(self, upload_service):
        assert upload_service.build_key("a.png", None, "/models/").startswith("models/")

    def test_name_that_slugs_to_nothing(self, upload_service):
        assert re.fullmatch(r"logos/[0-9a-f]{32}\.png", upload_service.build_key("a.png", "!!!"))

    def test_file_without_extension(self, upload_service):
        assert re.fullmatch(r"logos/[0-9a-f]{32}", upload_service.build_key("logo"))


class TestCreatePresignedPost:

    def test_policy_restricts_size_and_type(self, upload_service, monkeypatch):
        captured = {}

        def fake_presign(**kwargs):
            captured.update(kwargs)
            return {"url": "https://keycatalog-test.s3.amazonaws.com/", "fields": {"key": kwargs["Key"]}}

        monkeypatch.setattr(upload_service.client, "generate_presigned_post", fake_presign)

        upload_service.create_presigned_post(PresignRequest(filename="a.png", content_type="image/png"))

        assert ["content-length-range", 0, 5 * 1024 * 1024] in captured["Conditions"]
        assert {"Content-Type": "image/png"} in captured["Conditions"]
        assert captured["ExpiresIn"] == 3600
        assert captured["Bucket"] == "keycatalog-test"

    def test_missing_content_type(self, upload_service):
        with pytest.raises(BadRequestError):
            upload_service.create_presigned_post(PresignRequest(filename="a.png"))

    def test_storage_failure(self):
        service = UploadService(client=_FailingClient(), bucket_name="keycatalog-test")

        with pytest.raises(StorageError) as exc_info:
            service.create_presigned_post(PresignRequest(filename="a.png", content_type="image/png"))

        assert exc_info.value.detail == "Failed to generate upload URL"
