# Purpose: Read and publish icon-set objects in S3.
# Dependencies: boto3 (AWS S3).
# Notes: The client is created once per container and passed in; boto3 clients are thread-safe.
from __future__ import annotations

from typing import Any

import boto3


def s3_client(*, region: str = ""):
    if region:
        return boto3.client("s3", region_name=region)
    return boto3.client("s3")


class S3ObjectStore:
    def __init__(self, client: Any, *, cache_control: str = "") -> None:
        self.client = client
        self.cache_control = cache_control

    def list_keys(self, bucket: str, prefix: str) -> list[str]:
        """Keys directly under ``prefix``; nested folders are not descended into."""
        paginator = self.client.get_paginator("list_objects_v2")
        keys: list[str] = []
        for page in paginator.paginate(Bucket=bucket, Prefix=prefix, Delimiter="/"):
            for row in page.get("Contents") or []:
                key = str(row.get("Key") or "")
                if key and not key.endswith("/"):
                    keys.append(key)
        return keys

    def get_bytes(self, bucket: str, key: str) -> bytes:
        resp = self.client.get_object(Bucket=bucket, Key=key)
        return resp["Body"].read()

    def put_bytes(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        kwargs = {"Bucket": bucket, "Key": key, "Body": body, "ContentType": content_type or "application/octet-stream"}
        if self.cache_control:
            kwargs["CacheControl"] = self.cache_control
        self.client.put_object(**kwargs)
