import threading
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

from iconfont.fonts import GenerationResult, assign_codepoints
from iconfont.fonts.render import render_css

BUCKET = "assets"

SQUARE_SVG = b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M2 2 H22 V22 H2 Z"/></svg>'
TRIANGLE_SVG = b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M12 2 L22 22 L2 22 Z"/></svg>'


def s3_event(key, bucket=BUCKET):
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {"bucket": {"name": bucket, "arn": f"arn:aws:s3:::{bucket}"}, "object": {"key": key, "size": 1}},
            }
        ]
    }


def client_error(code, operation):
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class FakeStore:
    """In-memory object store that records every call."""

    def __init__(self, objects=None, fail_get=(), fail_put=(), fail_list=False):
        self.objects = {(BUCKET, k): v for k, v in (objects or {}).items()}
        self.content_types = {}
        self.calls = []
        self.fail_get = set(fail_get)
        self.fail_put = set(fail_put)
        self.fail_list = fail_list
        self._lock = threading.Lock()

    def _record(self, op, key):
        with self._lock:
            self.calls.append((op, key))

    def list_keys(self, bucket, prefix):
        self._record("list", prefix)
        if self.fail_list:
            raise client_error("AccessDenied", "ListObjectsV2")
        return sorted(
            k for (b, k) in self.objects if b == bucket and k.startswith(prefix) and "/" not in k[len(prefix):]
        )

    def get_bytes(self, bucket, key):
        self._record("get", key)
        if key in self.fail_get:
            raise client_error("NoSuchKey", "GetObject")
        return self.objects[(bucket, key)]

    def put_bytes(self, bucket, key, body, content_type):
        self._record("put", key)
        if key in self.fail_put:
            raise client_error("SlowDown", "PutObject")
        with self._lock:
            self.objects[(bucket, key)] = body
            self.content_types[key] = content_type

    def ops(self, op):
        return sorted(key for o, key in self.calls if o == op)

    def get_object(self, key):
        return self.objects[(BUCKET, key)]


class FakeGenerator:
    """Honours preassigned codepoints and renders the real stylesheet, but writes stub font binaries."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []

    def generate(self, options):
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        names = sorted(Path(p).stem for p in options.files)
        glyphs = assign_codepoints(names, options.codepoints, options.start_codepoint)
        css = render_css(options, glyphs)
        written = []
        for ext in options.types:
            path = options.dest / f"{options.font_name}.{ext}"
            path.write_bytes(b"font:" + ext.encode())
            written.append(path)
        css_path = options.dest / f"{options.font_name}.css"
        css_path.write_text(css, encoding="utf-8")
        written.append(css_path)
        return GenerationResult(css=css, files=written, glyphs=glyphs)


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def icon_objects():
    def make(folder, names, extra=None):
        objects = {f"{folder}/{name}.svg": SQUARE_SVG for name in names}
        objects.update(extra or {})
        return objects

    return make
