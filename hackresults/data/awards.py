"""
Awards repository over the extracted projects.json snapshot.

Provides:
- Winner lookups by URL / slug
- Sponsor and track breakdowns with per-award amounts
- Prize amount parsing and display formatting
"""
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ..core.schemas import AwardsData, AwardsMeta, ProjectAward, ProjectWithAwards
from .files import load_json_model

logger = logging.getLogger(__name__)

# Prizes paid in tokens, credits or plans don't count towards USD totals
NON_USD_MARKERS = ("NIL", "credits", "ZEC", "Plan")

_AMOUNT_RE = re.compile(r"\$?([\d,]+)")


def parse_amount(amount: str) -> int:
    """Parse a display amount like '$5,000' into USD; non-USD prizes are 0."""
    if any(marker in amount for marker in NON_USD_MARKERS):
        return 0
    match = _AMOUNT_RE.search(amount)
    if not match:
        return 0
    digits = match.group(1).replace(",", "")
    return int(digits) if digits else 0


def format_amount(amount: str) -> str:
    """Normalize an amount for display ('5000' -> '$5000', '$100 credits' -> '100 credits')."""
    if "credits" in amount:
        return amount.replace("$", "", 1)
    if "NIL" in amount:
        return amount
    if not amount.startswith("$"):
        return f"${amount}"
    return amount


def awards_usd(awards: list[ProjectAward]) -> int:
    """USD total of a list of awards."""
    return sum(parse_amount(a.amount) for a in awards)


@dataclass
class AwardMatch:
    """A project together with the subset of its awards that matched a lookup."""
    project: ProjectWithAwards
    awards: list[ProjectAward]

    @property
    def usd(self) -> int:
        return awards_usd(self.awards)


class AwardsRepository:
    """
    Read-only access to winning projects and their awards.
    """

    def __init__(self, data: AwardsData):
        self.data = data
        logger.info(
            f"AwardsRepository loaded ({len(data.projects)} projects, "
            f"{sum(len(p.awards) for p in data.projects)} awards)"
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "AwardsRepository":
        """Load projects.json."""
        return cls(load_json_model(path, AwardsData))

    # --------------------------------------------------------
    # Projects
    # --------------------------------------------------------

    def get_all_projects(self) -> list[ProjectWithAwards]:
        return self.data.projects

    def get_project_by_url(self, url: str) -> ProjectWithAwards | None:
        return next((p for p in self.data.projects if p.url == url), None)

    def get_project_by_slug(self, slug: str) -> ProjectWithAwards | None:
        """First project whose URL contains the slug."""
        return next((p for p in self.data.projects if slug in p.url), None)

    def get_meta(self) -> AwardsMeta:
        return self.data.meta

    def get_top_projects(self, limit: int = 10) -> list[ProjectWithAwards]:
        """Projects with the highest USD totals."""
        return sorted(self.data.projects, key=lambda p: p.total_usd or 0, reverse=True)[:limit]

    # --------------------------------------------------------
    # Sponsors
    # --------------------------------------------------------

    def get_all_sponsors(self) -> list[str]:
        """Sorted unique sponsor names as they appear on awards."""
        return sorted({a.sponsor for p in self.data.projects for a in p.awards})

    def get_projects_by_sponsor(self, sponsor: str) -> list[ProjectWithAwards]:
        """Projects with at least one award from exactly this sponsor name."""
        return [
            p for p in self.data.projects
            if any(a.sponsor == sponsor for a in p.awards)
        ]

    def get_projects_with_awards_from_sponsor(self, sponsor_names: list[str]) -> list[AwardMatch]:
        """
        Projects that won awards from a sponsor, with flexible name matching.

        An award matches when its sponsor equals, contains, or is contained in
        any of the given names (case-insensitive).

        Returns:
            Matches sorted by USD of the matched awards, highest first
        """
        names = [n.lower() for n in sponsor_names if n]

        def is_match(award: ProjectAward) -> bool:
            sponsor = award.sponsor.lower()
            return any(
                sponsor == name or name in sponsor or sponsor in name
                for name in names
            )

        results = []
        for project in self.data.projects:
            matching = [a for a in project.awards if is_match(a)]
            if matching:
                results.append(AwardMatch(project, matching))

        return sorted(results, key=lambda m: m.usd, reverse=True)

    # --------------------------------------------------------
    # Tracks
    # --------------------------------------------------------

    def get_all_tracks(self) -> list[str]:
        """Sorted unique track names across all awards."""
        return sorted({a.track for p in self.data.projects for a in p.awards if a.track})

    def get_projects_by_track(self, track: str) -> list[AwardMatch]:
        """
        Projects that won in a track (case-insensitive).

        Returns:
            Matches sorted by USD of the matched awards, highest first
        """
        normalized = track.lower()
        results = []
        for project in self.data.projects:
            matching = [a for a in project.awards if a.track and a.track.lower() == normalized]
            if matching:
                results.append(AwardMatch(project, matching))

        return sorted(results, key=lambda m: m.usd, reverse=True)
