"""Value types shared by the file queue components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union


@dataclass(slots=True, frozen=True)
class FileEntry:
    """One directory entry picked up during a scan.

    Entries are built fresh from each listing and never survive past the
    scan that produced them.
    """

    path: Path
    name: str
    is_file: bool

    @classmethod
    def from_dir_entry(cls, entry) -> "FileEntry":
        """Build from an ``os.DirEntry``; symlinks are not followed."""

        return cls(
            path=Path(entry.path),
            name=entry.name,
            is_file=entry.is_file(follow_symlinks=False),
        )


@dataclass(slots=True, frozen=True)
class Disposition:
    """Post-processing action: move into ``target`` or, when unset, delete."""

    target: Optional[Path] = None

    @property
    def deletes(self) -> bool:
        return self.target is None

    def describe(self) -> str:
        if self.deletes:
            return "delete"
        return f"move to {self.target}"


@dataclass(slots=True, frozen=True)
class Success:
    """The command started and exited with status 0."""

    @property
    def ok(self) -> bool:
        return True


@dataclass(slots=True, frozen=True)
class NonZeroExit:
    """The command started and exited with a non-zero status."""

    code: int

    @property
    def ok(self) -> bool:
        return False


@dataclass(slots=True, frozen=True)
class SpawnFailure:
    """The command could not be started, or was killed after timing out."""

    error: BaseException = field(compare=False)

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success, NonZeroExit, SpawnFailure]


class EventKind(str, Enum):
    """Filesystem notification categories the driver cares about."""

    CREATED = "created"
    MODIFIED = "modified"
    MOVED = "moved"
    DELETED = "deleted"
    OTHER = "other"

    @property
    def triggers_scan(self) -> bool:
        # Renames count as modifications of the directory
        return self in (EventKind.CREATED, EventKind.MODIFIED, EventKind.MOVED)


@dataclass(slots=True, frozen=True)
class WatchEvent:
    """A change notification for the watched directory."""

    kind: EventKind
    path: str
    is_directory: bool = False


@dataclass(slots=True, frozen=True)
class WatchError:
    """An error reported by the notifier instead of an event."""

    error: BaseException = field(compare=False)


@dataclass(slots=True)
class ScanReport:
    """Counters for one pass over the watched directory."""

    succeeded: int = 0
    failed: int = 0
    skipped: int = 0
    disposal_errors: int = 0
    aborted: bool = False
    interrupted: bool = False

    @property
    def invoked(self) -> int:
        return self.succeeded + self.failed
