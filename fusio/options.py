"""Options controlling how a file is opened."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class OpenOptions:
    """Flags for opening a file; by default read-only, no create, no truncate."""

    read: bool = True
    write: bool = False
    create: bool = False
    truncate: bool = False

    def with_read(self, read: bool) -> OpenOptions:
        """Return a copy with the read flag set."""
        return replace(self, read=read)

    def with_write(self, write: bool) -> OpenOptions:
        """Return a copy with the write flag set."""
        return replace(self, write=write)

    def with_create(self, create: bool) -> OpenOptions:
        """Return a copy with the create flag set; this always enables writing."""
        return replace(self, write=True, create=create)

    def with_truncate(self, truncate: bool) -> OpenOptions:
        """Return a copy with the truncate flag set."""
        return replace(self, truncate=truncate)