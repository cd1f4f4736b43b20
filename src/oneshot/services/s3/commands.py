from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from oneshot.core.errors import ErrorKind, ServiceError
from oneshot.core.models import BaseCommand, BinaryStream, require_text
from oneshot.services.s3.views import (
    DecryptObjectView,
    DeleteBucketView,
    DeleteObjectView,
    GetObjectView,
)


@dataclass(frozen=True)
class DeleteBucket(BaseCommand):
    """Deletes a bucket. The bucket must already be empty."""

    service_name = "s3"
    operation = "delete_bucket"
    view_class = DeleteBucketView
    required_fields = ("bucket",)

    bucket: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error deleting bucket {self.bucket}:"

    def send(self, client: Any) -> dict[str, Any]:
        response = client.delete_bucket(Bucket=self.bucket)
        return {**response, "Bucket": self.bucket}


@dataclass(frozen=True)
class DeleteObject(BaseCommand):
    service_name = "s3"
    operation = "delete_object"
    view_class = DeleteObjectView
    required_fields = ("bucket", "key")

    bucket: str
    key: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error deleting object {self.key} from bucket {self.bucket}:"

    def send(self, client: Any) -> dict[str, Any]:
        response = client.delete_object(Bucket=self.bucket, Key=self.key)
        return {**response, "Bucket": self.bucket, "Key": self.key}


@dataclass(frozen=True)
class GetObject(BaseCommand):
    """
    Downloads an object to a local file.

    Without a destination the file is named after the last segment of the
    key and written to the working directory.
    """

    service_name = "s3"
    operation = "get_object"
    view_class = GetObjectView
    required_fields = ("bucket", "key")

    bucket: str
    key: str
    destination: str | None = None

    def __post_init__(self):
        super().__post_init__()
        if self.destination is not None:
            require_text(self.destination, "destination")
        elif PurePosixPath(self.key).name in ("", ".."):
            raise ServiceError(
                ErrorKind.VALIDATION,
                f"Cannot name a file after key '{self.key}'; pass a destination.",
            )

    @property
    def output_file(self) -> Path:
        if self.destination is not None:
            return Path(self.destination)
        return Path(PurePosixPath(self.key).name)

    @property
    def error_prefix(self) -> str:
        return f"Got an error downloading object {self.key} from bucket {self.bucket}:"

    def send(self, client: Any) -> BinaryStream:
        response = client.get_object(Bucket=self.bucket, Key=self.key)
        return BinaryStream(
            body=response["Body"],
            destination=self.output_file,
            content_type=response.get("ContentType"),
            content_length=response.get("ContentLength"),
            summary={"Bucket": self.bucket, "Key": self.key},
        )


@dataclass(frozen=True)
class DecryptObject(BaseCommand):
    """
    Reads an object holding a KMS ciphertext blob and decrypts it with KMS.

    The blob is read whole; KMS accepts at most 6 KiB of ciphertext, so the
    object is small by construction.
    """

    service_name = "s3"
    operation = "decrypt_object"
    view_class = DecryptObjectView
    required_fields = ("bucket", "key")
    companion_services = ("kms",)

    bucket: str
    key: str

    @property
    def error_prefix(self) -> str:
        return f"Got an error decrypting object {self.key} from bucket {self.bucket}:"

    def send(self, client: Any, kms: Any) -> dict[str, Any]:
        response = client.get_object(Bucket=self.bucket, Key=self.key)
        body = response["Body"]
        try:
            blob = body.read()
        finally:
            body.close()

        decrypted = kms.decrypt(CiphertextBlob=blob)
        return {
            "Bucket": self.bucket,
            "Key": self.key,
            "KeyId": decrypted.get("KeyId"),
            "Plaintext": decrypted.get("Plaintext"),
        }
