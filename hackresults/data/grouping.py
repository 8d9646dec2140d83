"""
Grouping and ordering of award matches for sponsor and track pages.
"""
import re

from ..core.schemas import Sponsor
from .awards import AwardMatch, AwardsRepository, parse_amount

OTHER_TRACK = "Other"


def slugify_track(track: str) -> str:
    """URL slug for a track name ('Private DeFi & Trading' -> 'private-defi-and-trading')."""
    slug = track.lower().replace("&", "and")
    slug = re.sub(r"[^a-z0-9]+", "-", slug)
    return slug.strip("-")


def _first_award_usd(match: AwardMatch) -> int:
    return parse_amount(match.awards[0].amount) if match.awards else 0


def sort_by_prize(matches: list[AwardMatch]) -> list[AwardMatch]:
    """Order by the USD value of each project's first matched award, highest first."""
    return sorted(matches, key=_first_award_usd, reverse=True)


def group_by_track(matches: list[AwardMatch]) -> list[tuple[str, list[AwardMatch]]]:
    """
    Group a sponsor's winners by the track of their first matched award.

    Larger groups come first; awards without a track go to "Other", which is
    always last.
    """
    grouped: dict[str, list[AwardMatch]] = {}
    for match in matches:
        track = (match.awards[0].track if match.awards else None) or OTHER_TRACK
        grouped.setdefault(track, []).append(match)

    return sorted(
        grouped.items(),
        key=lambda item: (item[0] == OTHER_TRACK, -len(item[1])),
    )


def group_by_sponsor(matches: list[AwardMatch]) -> list[tuple[str, list[AwardMatch]]]:
    """
    Group a track's winners by sponsor, sponsors in alphabetical order.

    A project appears under every sponsor it won from in the track.
    """
    grouped: dict[str, list[AwardMatch]] = {}
    for match in matches:
        for sponsor in dict.fromkeys(a.sponsor for a in match.awards):
            grouped.setdefault(sponsor, []).append(match)

    return sorted(grouped.items())


def sponsor_winners(awards: AwardsRepository, sponsor: Sponsor) -> list[AwardMatch]:
    """Projects that won from a sponsor under its name, display name or id."""
    return awards.get_projects_with_awards_from_sponsor(
        [sponsor.name, sponsor.display_name, sponsor.id]
    )
