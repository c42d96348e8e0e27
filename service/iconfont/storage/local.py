from __future__ import annotations

from pathlib import Path


class LocalObjectStore:
    """
    Directory-backed store: ``<root>/<bucket>/<key>``.

    Used for offline runs of the command-line script. Content types are not
    persisted.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def _path(self, bucket: str, key: str) -> Path:
        path = (self.root / bucket / key).resolve()
        base = (self.root / bucket).resolve()
        if base not in path.parents:
            raise ValueError(f"Key escapes bucket root: {key}")
        return path

    def list_keys(self, bucket: str, prefix: str) -> list[str]:
        base = self.root / bucket
        folder = base / prefix.rstrip("/") if prefix.strip("/") else base
        if not folder.is_dir():
            return []
        return sorted(p.relative_to(base).as_posix() for p in folder.iterdir() if p.is_file())

    def get_bytes(self, bucket: str, key: str) -> bytes:
        return self._path(bucket, key).read_bytes()

    def put_bytes(self, bucket: str, key: str, body: bytes, content_type: str) -> None:
        path = self._path(bucket, key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(body)
