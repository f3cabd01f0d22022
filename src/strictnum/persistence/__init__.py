"""Pluggable text catalog stores behind the ICatalogStore Protocol."""

from __future__ import annotations

from strictnum.core.config import AppSettings
from strictnum.core.exceptions import ConfigError
from strictnum.persistence.filesystem_backend import FilesystemCatalogStore
from strictnum.persistence.s3_backend import S3CatalogStore


def create_catalog_store(settings: AppSettings | None = None):
    """Create the main catalog store from application settings.

    Returns:
        FilesystemCatalogStore rooted at ``txt.app_path``, or S3CatalogStore.
    """
    if settings is None:
        settings = AppSettings()

    txt = settings.txt
    if txt.backend == "s3":
        if not txt.s3_bucket:
            raise ConfigError("Missing required config: txt.s3_bucket")
        return S3CatalogStore(
            bucket=txt.s3_bucket,
            prefix=txt.s3_prefix,
            region=txt.region,
            endpoint_url=txt.endpoint_url,
        )

    return FilesystemCatalogStore(txt.app_path)
