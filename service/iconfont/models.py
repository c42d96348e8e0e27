from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ICON_EXTENSION = "svg"


class S3Bucket(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)


class S3Object(BaseModel):
    model_config = ConfigDict(extra="ignore")

    key: str = Field(..., min_length=1)


class S3Entity(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    bucket: S3Bucket
    object_: S3Object = Field(..., alias="object")


class S3EventRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    s3: S3Entity


class S3Notification(BaseModel):
    """Object-created notification as delivered by S3; only the first record is used."""

    model_config = ConfigDict(extra="ignore")

    Records: list[S3EventRecord] = Field(..., min_length=1)


@dataclass(frozen=True)
class TriggerEvent:
    bucket: str
    key: str


@dataclass(frozen=True)
class IconFolder:
    bucket: str
    prefix: str
    name: str

    @property
    def codepoint_map_name(self) -> str:
        return f"{self.name}.json"

    def key_for(self, filename: str) -> str:
        return posixpath.join(self.prefix, filename) if self.prefix else filename


@dataclass(frozen=True)
class IconFile:
    name: str
    path: Path


@dataclass(frozen=True)
class DownloadResult:
    icons: list[IconFile]
    codepoint_map: Path | None = None
    failed: list[str] = field(default_factory=list)

    @property
    def icon_names(self) -> set[str]:
        return {icon.name for icon in self.icons}


@dataclass(frozen=True)
class GeneratedBundle:
    files: list[Path]
    codepoints: dict[str, int]
    codepoint_map: Path | None = None


@dataclass(frozen=True)
class UploadResult:
    uploaded: list[str]
    failed: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PipelineResult:
    status: Literal["skipped", "completed"]
    folder: IconFolder | None = None
    downloaded: int = 0
    uploaded: list[str] = field(default_factory=list)
    codepoints: dict[str, int] = field(default_factory=dict)
