"""Tests for the S3 catalog seed script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

from strictnum.persistence.s3_backend import S3CatalogStore
from strictnum.services.format_number import NumberFormatter
from strictnum.services.txt import TextService

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from seed_catalogs import create_bucket, seed  # noqa: E402

BUCKET = "test-text-catalogs"


@pytest.fixture
def s3():
    with mock_aws():
        yield boto3.client("s3", region_name="us-east-1")


class TestCreateBucket:
    def test_creates_bucket(self, s3):
        create_bucket(s3, BUCKET)
        assert BUCKET in [b["Name"] for b in s3.list_buckets()["Buckets"]]

    def test_idempotent_skips_existing(self, s3):
        create_bucket(s3, BUCKET)
        create_bucket(s3, BUCKET)  # should not raise
        assert len(s3.list_buckets()["Buckets"]) == 1


class TestSeed:
    def test_uploads_bundled_catalogs(self, s3):
        create_bucket(s3, BUCKET)
        keys = seed(s3, BUCKET)
        assert "vendor/strictnum/core/language/da/format_number.json" in keys
        assert "vendor/strictnum/core/language/en/format_number.json" in keys

    def test_uploads_app_catalogs_under_prefix(self, s3, tmp_path):
        (tmp_path / "da").mkdir()
        (tmp_path / "da" / "common.json").write_text('{"hello": "Hej"}', encoding="utf-8")
        create_bucket(s3, BUCKET)

        keys = seed(s3, BUCKET, prefix="tenant-a", app_language=tmp_path)

        assert "tenant-a/language/da/common.json" in keys
        store = S3CatalogStore(bucket=BUCKET, prefix="tenant-a", region="us-east-1")
        assert TextService(store, "da").get("hello", "common") == "Hej"

    def test_seeded_bucket_serves_formatter_messages(self, s3):
        create_bucket(s3, BUCKET)
        seed(s3, BUCKET)
        text = TextService(S3CatalogStore(bucket=BUCKET, region="us-east-1"), "da")
        fmt = NumberFormatter(text)
        with pytest.raises(ValueError, match="Fortegn uden cifre"):
            fmt.to_db("-", 10, 2)
