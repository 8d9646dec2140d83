"""
Search-ready project records.

Flattens a Devfolio project and its award record into the fields the fuzzy
index, filters and sort keys read.
"""
import logging
from dataclasses import dataclass
from typing import Iterable

from ..core.schemas import DevfolioProject, ProjectWithAwards

logger = logging.getLogger(__name__)


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate keeping first-occurrence order."""
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class SearchableRecord:
    """One project, normalized for search and filtering."""
    id: str
    display_name: str
    short_description: str

    # Searchable text
    people_names: tuple[str, ...]
    people_handles: tuple[str, ...]
    tags: tuple[str, ...]

    # Award data for filtering
    sponsor_names: tuple[str, ...]
    track_names: tuple[str, ...]

    # Full data references (rendering only)
    project: DevfolioProject
    award_record: ProjectWithAwards | None = None

    @property
    def total_award_value(self) -> float:
        return self.award_record.total_usd if self.award_record else 0

    @property
    def award_count(self) -> int:
        return len(self.award_record.awards) if self.award_record else 0


def build_search_record(
    project: DevfolioProject,
    award_record: ProjectWithAwards | None = None
) -> SearchableRecord:
    """Normalize a single (project, award record) pair."""
    people_names = tuple(
        name for name in (b.full_name for b in project.builders) if name
    )
    people_handles = tuple(b.username for b in project.builders)
    tags = tuple(h.hashtag.name for h in project.hashtags)

    awards = award_record.awards if award_record else []
    sponsor_names = _unique(a.sponsor for a in awards)
    track_names = _unique(a.track for a in awards if a.track)

    return SearchableRecord(
        id=project.slug,
        display_name=project.name,
        short_description=project.tagline or "",
        people_names=people_names,
        people_handles=people_handles,
        tags=tags,
        sponsor_names=sponsor_names,
        track_names=track_names,
        project=project,
        award_record=award_record,
    )


def build_search_records(
    pairs: Iterable[tuple[DevfolioProject, ProjectWithAwards | None]]
) -> list[SearchableRecord]:
    """
    Build search records for every (project, award record) pair.

    Order is preserved. A missing award record is not an error: the record
    gets zero totals and no sponsors or tracks.
    """
    records = [build_search_record(project, awards) for project, awards in pairs]
    logger.debug(f"Built {len(records)} search records")
    return records


# --------------------------------------------------------
# Filter option accessors
# --------------------------------------------------------

def all_sponsors(records: Iterable[SearchableRecord]) -> list[str]:
    """Sorted unique sponsor names across records."""
    return sorted({s for r in records for s in r.sponsor_names})


def all_tracks(records: Iterable[SearchableRecord]) -> list[str]:
    """Sorted unique track names across records."""
    return sorted({t for r in records for t in r.track_names})


def all_tags(records: Iterable[SearchableRecord]) -> list[str]:
    """Sorted unique hashtags across records."""
    return sorted({t for r in records for t in r.tags})
