"""
Preview card content for project, sponsor and track pages.
"""
from ..core.schemas import DevfolioProject, ProjectWithAwards, Sponsor
from ..data.awards import AwardsRepository
from ..data.grouping import sponsor_winners
from ..data.sponsors import SponsorDirectory
from ..scrapers.devfolio_client import get_image_url
from .renderer import OgAvatar, OgImageOptions, OgStat


def format_usd(amount: float) -> str:
    return f"${amount:,.0f}"


def project_card(
    slug: str,
    award_record: ProjectWithAwards | None,
    project: DevfolioProject | None,
    badge_prefix: str = "Zypherpunk"
) -> OgImageOptions:
    """Card for a winning project: total prize, award and sponsor counts."""
    favicon_url = get_image_url(project.favicon) if project and project.favicon else None

    avatars = [
        OgAvatar(
            url=get_image_url(b.profile_image) if b.profile_image else None,
            name=b.first_name or b.username,
        )
        for b in (project.builders if project else [])
    ]

    stats = []
    if award_record:
        stats = [
            OgStat("Total Prize", format_usd(award_record.total_usd), is_gold=True),
            OgStat("Awards", str(len(award_record.awards))),
            OgStat("Sponsors", str(len({a.sponsor for a in award_record.awards}))),
        ]

    title = (project.name if project else None) or (award_record.name if award_record else None) or slug
    return OgImageOptions(
        title=title,
        subtitle=(project.tagline if project else None) or None,
        badge=f"{badge_prefix} Winner",
        favicon_url=favicon_url,
        avatars=avatars,
        stats=stats,
    )


def sponsor_card(
    sponsor: Sponsor,
    awards: AwardsRepository,
    badge_prefix: str = "Zypherpunk"
) -> OgImageOptions:
    """Card for a sponsor: prize pool, winner count and USD awarded."""
    winners = sponsor_winners(awards, sponsor)
    total_awarded = sum(match.usd for match in winners)

    stats = []
    if sponsor.total_prize:
        stats.append(OgStat("Prize Pool", sponsor.total_prize, is_gold=True))
    stats.append(OgStat("Winners", str(len(winners))))
    if total_awarded > 0:
        stats.append(OgStat("Awarded", format_usd(total_awarded), is_gold=True))

    return OgImageOptions(
        title=sponsor.name,
        subtitle=sponsor.description or None,
        badge=f"{badge_prefix} Sponsor",
        favicon_url=sponsor.logo or None,
        stats=stats,
    )


def track_card(
    track: str,
    awards: AwardsRepository,
    sponsors: SponsorDirectory,
    badge_prefix: str = "Zypherpunk"
) -> OgImageOptions:
    """Card for a track: winners, sponsors with bounties, USD awarded."""
    winners = awards.get_projects_by_track(track)
    bounties = sponsors.get_sponsors_for_track(track)
    total_awarded = sum(match.usd for match in winners)

    stats = [
        OgStat("Winners", str(len(winners))),
        OgStat("Sponsors", str(len(bounties))),
    ]
    if total_awarded > 0:
        stats.append(OgStat("Awarded", format_usd(total_awarded), is_gold=True))

    return OgImageOptions(
        title=track,
        badge=f"{badge_prefix} Track",
        stats=stats,
    )
