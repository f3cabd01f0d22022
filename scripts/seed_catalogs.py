"""Upload text catalogs to the S3 bucket used by the ``s3`` catalog backend.

Bundled strictnum catalogs go under ``vendor/strictnum/core/language/`` so the
bucket alone can serve every layer; an optional app directory is uploaded
under ``language/``.

Usage:
    python scripts/seed_catalogs.py --bucket text-catalogs --endpoint-url http://localhost:4566
    python scripts/seed_catalogs.py --bucket text-catalogs --app-language ./language
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import boto3

from strictnum.services.txt import BUILTIN_NAMESPACE, builtin_catalog_root


def create_bucket(s3: Any, bucket: str) -> None:
    """Create the bucket. Skips if it already exists."""
    existing = [b["Name"] for b in s3.list_buckets().get("Buckets", [])]
    if bucket in existing:
        print(f"  Bucket {bucket} already exists, skipping")
        return
    s3.create_bucket(Bucket=bucket)
    print(f"  Created bucket {bucket}")


def upload_catalogs(s3: Any, bucket: str, source: Path, key_prefix: str) -> list[str]:
    """Upload every ``{lang}/**/*.json`` below ``source``. Returns the keys written."""
    keys: list[str] = []
    for path in sorted(source.rglob("*.json")):
        key = f"{key_prefix}/{path.relative_to(source).as_posix()}"
        s3.put_object(Bucket=bucket, Key=key, Body=path.read_bytes(), ContentType="application/json")
        keys.append(key)
    print(f"  Uploaded {len(keys)} catalogs to s3://{bucket}/{key_prefix}/")
    return keys


def seed(s3: Any, bucket: str, prefix: str = "", app_language: Path | None = None) -> list[str]:
    """Upload bundled and (optionally) app catalogs under ``prefix``."""
    base = prefix.strip("/")
    join = (lambda p: f"{base}/{p}") if base else (lambda p: p)

    keys = upload_catalogs(s3, bucket, builtin_catalog_root(), join(f"vendor/{BUILTIN_NAMESPACE}/language"))
    if app_language is not None:
        keys += upload_catalogs(s3, bucket, app_language, join("language"))
    return keys


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed S3 with strictnum text catalogs")
    parser.add_argument("--bucket", required=True, help="Target bucket")
    parser.add_argument("--prefix", default="", help="Key prefix (matches STRICTNUM_TXT_S3_PREFIX)")
    parser.add_argument("--app-language", type=Path, default=None, help="App language directory to upload")
    parser.add_argument("--endpoint-url", default=None, help="S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    s3 = boto3.client("s3", **kwargs)

    print("Creating bucket...")
    create_bucket(s3, args.bucket)

    print("Uploading catalogs...")
    seed(s3, args.bucket, prefix=args.prefix, app_language=args.app_language)

    print("Done!")


if __name__ == "__main__":
    main()
