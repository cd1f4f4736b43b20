from collections.abc import Mapping
from typing import Any

from oneshot.core.presenter import UNKNOWN, field_or_unknown


class DeleteBucketView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        return [f"Deleted bucket {field_or_unknown(payload, 'Bucket')}"]


class DeleteObjectView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        key = field_or_unknown(payload, "Key")
        bucket = field_or_unknown(payload, "Bucket")
        lines = [f"Deleted object {key} from bucket {bucket}"]
        if payload.get("VersionId"):
            lines.append(f"  Version: {payload['VersionId']}")
        return lines


class GetObjectView:
    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        key = field_or_unknown(payload, "Key")
        bucket = field_or_unknown(payload, "Bucket")
        return [
            f"Downloaded {field_or_unknown(payload, 'BytesWritten')} bytes from "
            f"s3://{bucket}/{key} to {field_or_unknown(payload, 'Destination')}."
        ]


class DecryptObjectView:
    """Prints the decrypted plaintext, one output line per line of text."""

    @classmethod
    def format_lines(cls, payload: Mapping[str, Any]) -> list[str]:
        plaintext = payload.get("Plaintext")
        if plaintext is None:
            return [UNKNOWN]
        if isinstance(plaintext, bytes):
            plaintext = plaintext.decode("utf-8", errors="replace")
        return plaintext.splitlines()
