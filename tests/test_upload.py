from iconfont.models import IconFolder
from iconfont.upload import content_type_for, upload_bundle

from conftest import BUCKET, FakeStore

FOLDER = IconFolder(bucket=BUCKET, prefix="icons/set", name="set")


def test_content_types():
    assert content_type_for("set.eot") == "application/vnd.ms-fontobject"
    assert content_type_for("set.woff2") == "font/woff2"
    assert content_type_for("set.woff") == "application/font-woff"
    assert content_type_for("set.ttf") == "application/font-sfnt"
    assert content_type_for("set.css") == "text/css"
    assert content_type_for("set.html") == "text/html"
    assert content_type_for("set.scss") == "text/x-scss"
    assert content_type_for("set.json") == "application/json"
    assert content_type_for("set.svg") == "text/plain"


def test_uploads_recognized_outputs_only(workdir):
    for name in ["a.svg", "set.ttf", "set.css", "set.json", "notes.txt"]:
        (workdir / name).write_bytes(name.encode())
    (workdir / "nested").mkdir()
    (workdir / "nested" / "set.woff").write_bytes(b"x")
    store = FakeStore()

    result = upload_bundle(store, FOLDER, workdir, max_workers=2)

    assert result.uploaded == ["icons/set/set.css", "icons/set/set.json", "icons/set/set.ttf"]
    assert result.failed == []
    assert store.get_object("icons/set/set.css") == b"set.css"
    assert store.content_types["icons/set/set.ttf"] == "application/font-sfnt"
    assert store.content_types["icons/set/set.json"] == "application/json"


def test_failed_upload_is_skipped(workdir):
    for name in ["set.ttf", "set.woff", "set.css"]:
        (workdir / name).write_bytes(b"x")
    store = FakeStore(fail_put={"icons/set/set.woff"})

    result = upload_bundle(store, FOLDER, workdir)

    assert result.uploaded == ["icons/set/set.css", "icons/set/set.ttf"]
    assert result.failed == ["set.woff"]
    assert store.ops("put") == ["icons/set/set.css", "icons/set/set.ttf", "icons/set/set.woff"]


def test_empty_workdir_uploads_nothing(tmp_path):
    store = FakeStore()
    result = upload_bundle(store, FOLDER, tmp_path / "missing")
    assert result.uploaded == []
    assert store.calls == []


def test_unexpected_upload_error_is_skipped(workdir):
    class ResettingStore(FakeStore):
        def put_bytes(self, bucket, key, body, content_type):
            if key.endswith(".woff"):
                self._record("put", key)
                raise RuntimeError("connection reset")
            super().put_bytes(bucket, key, body, content_type)

    for name in ["set.ttf", "set.woff", "set.css"]:
        (workdir / name).write_bytes(b"x")
    store = ResettingStore()

    result = upload_bundle(store, FOLDER, workdir)

    assert result.uploaded == ["icons/set/set.css", "icons/set/set.ttf"]
    assert result.failed == ["set.woff"]
