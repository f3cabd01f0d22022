"""S3 backend implementing ICatalogStore."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from strictnum.core.exceptions import CatalogError, CatalogNotFoundError

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


class S3CatalogStore:
    """ICatalogStore backed by an S3 bucket, optionally under a key prefix."""

    def __init__(self, bucket: str, prefix: str = "", region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        self._prefix = prefix.strip("/")
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def _key(self, path: str) -> str:
        return f"{self._prefix}/{path}" if self._prefix else path

    def read(self, path: str) -> bytes:
        try:
            resp = self._client.get_object(Bucket=self._bucket, Key=self._key(path))
            return resp["Body"].read()
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                raise CatalogNotFoundError(path) from exc
            raise CatalogError(f"S3 read failed for {path!r}: {exc}") from exc

    def exists(self, path: str) -> bool:
        try:
            self._client.head_object(Bucket=self._bucket, Key=self._key(path))
            return True
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise CatalogError(f"S3 head failed for {path!r}: {exc}") from exc
