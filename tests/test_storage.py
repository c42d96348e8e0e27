from types import SimpleNamespace

import pytest

from iconfont.storage import LocalObjectStore, S3ObjectStore


def test_local_store_round_trip(tmp_path):
    store = LocalObjectStore(tmp_path)
    store.put_bytes("assets", "icons/set/a.svg", b"<svg/>", "image/svg+xml")
    store.put_bytes("assets", "icons/set/nested/b.svg", b"<svg/>", "image/svg+xml")

    assert store.list_keys("assets", "icons/set/") == ["icons/set/a.svg"]
    assert store.get_bytes("assets", "icons/set/a.svg") == b"<svg/>"
    assert store.list_keys("assets", "icons/missing/") == []


def test_local_store_rejects_escaping_keys(tmp_path):
    with pytest.raises(ValueError):
        LocalObjectStore(tmp_path).get_bytes("assets", "../secret")


class FakeS3Client:
    def __init__(self, pages):
        self.pages = pages
        self.paginate_kwargs = None
        self.put_kwargs = None

    def get_paginator(self, name):
        assert name == "list_objects_v2"
        return SimpleNamespace(paginate=self._paginate)

    def _paginate(self, **kwargs):
        self.paginate_kwargs = kwargs
        return iter(self.pages)

    def get_object(self, Bucket, Key):
        return {"Body": SimpleNamespace(read=lambda: f"{Bucket}/{Key}".encode())}

    def put_object(self, **kwargs):
        self.put_kwargs = kwargs


def test_s3_store_lists_all_pages():
    client = FakeS3Client(
        [
            {"Contents": [{"Key": "icons/set/a.svg"}, {"Key": "icons/set/"}]},
            {"CommonPrefixes": [{"Prefix": "icons/set/nested/"}]},
            {"Contents": [{"Key": "icons/set/b.svg"}]},
        ]
    )
    store = S3ObjectStore(client)

    assert store.list_keys("assets", "icons/set/") == ["icons/set/a.svg", "icons/set/b.svg"]
    assert client.paginate_kwargs == {"Bucket": "assets", "Prefix": "icons/set/", "Delimiter": "/"}


def test_s3_store_get_and_put():
    client = FakeS3Client([])
    store = S3ObjectStore(client, cache_control="max-age=300")

    assert store.get_bytes("assets", "icons/set/a.svg") == b"assets/icons/set/a.svg"
    store.put_bytes("assets", "icons/set/set.css", b"css", "text/css")
    assert client.put_kwargs == {
        "Bucket": "assets",
        "Key": "icons/set/set.css",
        "Body": b"css",
        "ContentType": "text/css",
        "CacheControl": "max-age=300",
    }
