"""
Dataset assembly: award records joined with Devfolio project details.
"""
import logging
from dataclasses import dataclass, field

from ..core.config import Settings
from ..core.schemas import DevfolioProject, ProjectWithAwards
from ..scrapers.devfolio_client import DevfolioClient, extract_slug_from_url
from ..search.records import SearchableRecord, build_search_records
from .awards import AwardsRepository
from .sponsors import SponsorDirectory

logger = logging.getLogger(__name__)

ProjectPair = tuple[DevfolioProject, ProjectWithAwards | None]


def fallback_project(award_record: ProjectWithAwards, slug: str | None = None) -> DevfolioProject:
    """Minimal project built from the award record when Devfolio has no details."""
    return DevfolioProject(
        name=award_record.name,
        slug=slug or extract_slug_from_url(award_record.url) or award_record.name,
    )


def pair_projects(
    awards: AwardsRepository,
    client: DevfolioClient | None = None
) -> list[ProjectPair]:
    """
    Pair every award record with its Devfolio project.

    Args:
        awards: Awards repository
        client: Devfolio client; None skips fetching and uses fallbacks only

    Returns:
        (project, award record) pairs in projects.json order
    """
    award_records = awards.get_all_projects()
    slugs = [extract_slug_from_url(p.url) for p in award_records]

    fetched: dict[str, DevfolioProject] = {}
    if client is not None:
        fetched = client.fetch_projects([s for s in slugs if s])

    pairs: list[ProjectPair] = []
    missing = 0
    for record, slug in zip(award_records, slugs):
        project = fetched.get(slug) if slug else None
        if project is None:
            missing += 1
            project = fallback_project(record, slug)
        pairs.append((project, record))

    if missing and client is not None:
        logger.warning(f"{missing} project(s) missing Devfolio details, using award data only")

    return pairs


@dataclass
class Dataset:
    """Everything the browser and image generator read."""
    awards: AwardsRepository
    sponsors: SponsorDirectory
    pairs: list[ProjectPair] = field(default_factory=list)
    records: list[SearchableRecord] = field(default_factory=list)

    def get_record(self, slug: str) -> SearchableRecord | None:
        return next((r for r in self.records if r.id == slug), None)


def load_dataset(
    settings: Settings,
    client: DevfolioClient | None = None
) -> Dataset:
    """
    Load snapshots, fetch project details and build search records.

    Raises:
        DataFileError: projects.json or sponsors.json is missing or invalid
    """
    paths = settings.paths.resolve(settings.project_root)
    awards = AwardsRepository.from_file(paths.projects_json)
    sponsors = SponsorDirectory.from_file(paths.sponsors_json)

    pairs = pair_projects(awards, client)
    records = build_search_records(pairs)

    logger.info(f"Dataset ready: {len(records)} projects, {len(sponsors.get_all_sponsors())} sponsors")
    return Dataset(awards=awards, sponsors=sponsors, pairs=pairs, records=records)
