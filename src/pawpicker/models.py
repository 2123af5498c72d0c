# File picker models — wire schemas and navigation state.
# Created: 2026-10-19

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class EntryType(str, Enum):
    """Kind of filesystem child, as the server spells it."""

    DIRECTORY = "dir"
    FILE = "file"


class SelectionMode(str, Enum):
    """What the caller wants back from the picker."""

    DIRECTORY = "dir"  # confirm a folder, no content
    FILE = "file"  # pick a file, content is read


class Entry(BaseModel):
    """A single file or directory entry."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: EntryType
    path: str

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIRECTORY


class Listing(BaseModel):
    """Directory listing returned by ``GET /v1/files/browse``."""

    entries: list[Entry] = []
    current: str = ""
    parent: str | None = None
    error: str | None = None

    @model_validator(mode="after")
    def _require_current(self) -> Listing:
        # A listing without an error must say where it is
        if self.error is None and not self.current:
            raise ValueError("browse response has neither current nor error")
        return self


class FileContent(BaseModel):
    """File body returned by ``GET /v1/files/read-file``."""

    path: str
    name: str
    content: str


@dataclass(frozen=True)
class Breadcrumb:
    """One segment of the breadcrumb trail."""

    name: str
    path: str


@dataclass
class NavigationState:
    """The single mutable state of a navigator."""

    requested_path: str = ""
    resolved_path: str = ""
    entries: tuple[Entry, ...] = ()
    parent_path: str | None = None
    loading: bool = False
    error: str | None = None
