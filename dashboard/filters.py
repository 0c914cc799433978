"""Platform filter over a fetched contest list."""

from __future__ import annotations

from collections.abc import Iterable

from dashboard import Contest


class PlatformFilter:
    """Holds the contest list and the set of selected platforms.

    An empty selection means no filter: every contest is shown.
    """

    def __init__(self, contests: Iterable[Contest], selected: Iterable[str] = ()) -> None:
        self._contests: tuple[Contest, ...] = tuple(contests)
        self._platforms: list[str] = sorted({c.host for c in self._contests})
        self._selected: set[str] = set(selected)

    @property
    def contests(self) -> tuple[Contest, ...]:
        return self._contests

    @property
    def platforms(self) -> list[str]:
        return list(self._platforms)

    @property
    def selected(self) -> frozenset[str]:
        return frozenset(self._selected)

    @property
    def filtered(self) -> list[Contest]:
        if not self._selected:
            return list(self._contests)
        return [c for c in self._contests if c.host in self._selected]

    def unknown_platforms(self, platforms: Iterable[str]) -> set[str]:
        """Platforms that no contest in the list is hosted on."""
        return set(platforms) - set(self._platforms)

    def is_selected(self, platform: str) -> bool:
        return platform in self._selected

    def toggle(self, platform: str) -> None:
        if platform in self._selected:
            self._selected.remove(platform)
        else:
            self._selected.add(platform)

    def clear(self) -> None:
        self._selected.clear()
