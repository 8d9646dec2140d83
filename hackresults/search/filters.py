"""
Sponsor / track / prize filters over search records.

Axes are conjunctive (sponsor AND track AND prize range); values within an
axis are disjunctive (either selected sponsor).
"""
from dataclasses import dataclass, field, replace
from typing import Iterable

from .records import SearchableRecord


@dataclass(frozen=True)
class FilterSelection:
    """Current filter choices. Empty sets and None bounds are unconstrained."""
    sponsors: frozenset[str] = field(default_factory=frozenset)
    tracks: frozenset[str] = field(default_factory=frozenset)
    min_prize: float | None = None
    max_prize: float | None = None

    def is_empty(self) -> bool:
        return all([
            not self.sponsors,
            not self.tracks,
            self.min_prize is None,
            self.max_prize is None,
        ])

    def toggle_sponsor(self, sponsor: str) -> "FilterSelection":
        return replace(self, sponsors=self.sponsors ^ {sponsor})

    def toggle_track(self, track: str) -> "FilterSelection":
        return replace(self, tracks=self.tracks ^ {track})

    def with_prize_range(
        self,
        min_prize: float | None = None,
        max_prize: float | None = None
    ) -> "FilterSelection":
        return replace(self, min_prize=min_prize, max_prize=max_prize)


def matches(record: SearchableRecord, selection: FilterSelection) -> bool:
    """Check one record against the selection."""
    if selection.sponsors and selection.sponsors.isdisjoint(record.sponsor_names):
        return False

    if selection.tracks and selection.tracks.isdisjoint(record.track_names):
        return False

    total = record.total_award_value
    if selection.min_prize is not None and total < selection.min_prize:
        return False
    if selection.max_prize is not None and total > selection.max_prize:
        return False

    return True


def filter_records(
    records: Iterable[SearchableRecord],
    selection: FilterSelection | None = None
) -> list[SearchableRecord]:
    """Records that pass the selection, in their input order."""
    if selection is None or selection.is_empty():
        return list(records)
    return [r for r in records if matches(r, selection)]
