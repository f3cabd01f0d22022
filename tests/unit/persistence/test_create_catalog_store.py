"""Tests for the catalog store factory."""

from __future__ import annotations

import pytest
from moto import mock_aws

from strictnum.core.config import AppSettings, TxtConfig
from strictnum.core.exceptions import ConfigError
from strictnum.persistence import create_catalog_store
from strictnum.persistence.filesystem_backend import FilesystemCatalogStore
from strictnum.persistence.s3_backend import S3CatalogStore


def test_filesystem_is_default(tmp_path):
    store = create_catalog_store(AppSettings(txt=TxtConfig(app_path=str(tmp_path))))
    assert isinstance(store, FilesystemCatalogStore)
    assert store.root == tmp_path.resolve()


def test_s3_backend_selected():
    with mock_aws():
        store = create_catalog_store(AppSettings(txt=TxtConfig(backend="s3", s3_bucket="catalogs")))
    assert isinstance(store, S3CatalogStore)


def test_s3_backend_requires_bucket():
    with pytest.raises(ConfigError):
        create_catalog_store(AppSettings(txt=TxtConfig(backend="s3")))
