"""Coding Contests Dashboard — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Contest:
    """A single upcoming contest as listed by CLIST."""

    id: int
    event: str
    host: str
    href: str
    start: datetime
    duration: int


@dataclass
class FetchResult:
    """Outcome of one fetch: either contests or an error message."""

    contests: list[Contest] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
