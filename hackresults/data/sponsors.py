"""
Sponsor directory over the extracted sponsors.json snapshot.

Resolves the sponsor names found on awards to sponsor entries, and award
tracks to the bounties sponsors offered.
"""
import logging
from dataclasses import dataclass
from pathlib import Path

from ..core.schemas import Sponsor, SponsorBounty, SponsorsData
from .aliases import ALL_TRACKS, SPONSOR_NAME_ALIASES, TRACK_NAME_ALIASES
from .files import load_json_model

logger = logging.getLogger(__name__)


@dataclass
class TrackBounty:
    """A sponsor bounty that applies to a track."""
    sponsor: Sponsor
    bounty: SponsorBounty


class SponsorDirectory:
    """
    Sponsor lookups with alias-table and fuzzy name fallbacks.
    """

    def __init__(
        self,
        data: SponsorsData,
        name_aliases: dict[str, str] | None = None,
        track_aliases: dict[str, list[str]] | None = None
    ):
        """
        Args:
            data: Parsed sponsors.json
            name_aliases: Award sponsor name -> sponsor id
            track_aliases: Lowercased track name -> alternate lowercased names
        """
        self.data = data
        self.name_aliases = SPONSOR_NAME_ALIASES if name_aliases is None else name_aliases
        self.track_aliases = TRACK_NAME_ALIASES if track_aliases is None else track_aliases
        logger.info(f"SponsorDirectory loaded ({len(data.sponsors)} sponsors)")

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> "SponsorDirectory":
        """Load sponsors.json."""
        return cls(load_json_model(path, SponsorsData), **kwargs)

    # --------------------------------------------------------
    # Sponsor lookups
    # --------------------------------------------------------

    def get_all_sponsors(self) -> list[Sponsor]:
        return self.data.sponsors

    def get_sponsor_by_id(self, sponsor_id: str) -> Sponsor | None:
        return next((s for s in self.data.sponsors if s.id == sponsor_id), None)

    def get_sponsor_by_name(self, name: str) -> Sponsor | None:
        """
        Find a sponsor by name.

        Exact (case-insensitive) name or display name first, then partial
        matches such as "ECC (Electric Coin Company)" -> "Electric Coin Company".
        """
        lowered = name.lower()

        for sponsor in self.data.sponsors:
            if sponsor.name.lower() == lowered or sponsor.display_name.lower() == lowered:
                return sponsor

        for sponsor in self.data.sponsors:
            if (
                sponsor.display_name.lower() in lowered
                or sponsor.name.lower() in lowered
                or lowered in sponsor.name.lower()
            ):
                return sponsor

        return None

    def get_sponsor_for_award(self, sponsor_name: str) -> Sponsor | None:
        """Resolve an award's sponsor name via the alias table, then by name."""
        sponsor_id = self.name_aliases.get(sponsor_name)
        if sponsor_id:
            return self.get_sponsor_by_id(sponsor_id)
        return self.get_sponsor_by_name(sponsor_name)

    def get_sponsors_with_prizes(self) -> list[Sponsor]:
        return [s for s in self.data.sponsors if s.total_prize is not None]

    def get_sponsor_website(self, sponsor_name: str) -> str | None:
        sponsor = self.get_sponsor_for_award(sponsor_name)
        return sponsor.website if sponsor else None

    # --------------------------------------------------------
    # Bounties and tracks
    # --------------------------------------------------------

    def get_bounty_for_award(self, sponsor_name: str, track: str | None = None) -> SponsorBounty | None:
        """
        Find the bounty an award was won under.

        Order: exact track, partial track match, "All Tracks", first bounty.
        """
        sponsor = self.get_sponsor_for_award(sponsor_name)
        if not sponsor or not sponsor.bounties:
            return None

        bounties = sponsor.bounties
        if not track:
            return bounties[0]

        normalized = track.lower()

        for bounty in bounties:
            if bounty.track.lower() == normalized:
                return bounty

        for bounty in bounties:
            bounty_track = bounty.track.lower()
            if bounty_track in normalized or normalized in bounty_track:
                return bounty

        for bounty in bounties:
            if bounty.track.lower() == ALL_TRACKS:
                return bounty

        return bounties[0]

    def get_all_tracks(self) -> list[str]:
        """Sorted unique bounty tracks, excluding the catch-all "All Tracks"."""
        return sorted({
            bounty.track
            for sponsor in self.data.sponsors
            for bounty in sponsor.bounties or []
            if bounty.track and bounty.track != "All Tracks"
        })

    def get_sponsors_for_track(self, track: str) -> list[TrackBounty]:
        """Every (sponsor, bounty) pair that applies to the track, aliases included."""
        normalized = track.lower()
        alternates = self.track_aliases.get(normalized, [])

        results = []
        for sponsor in self.data.sponsors:
            for bounty in sponsor.bounties or []:
                bounty_track = bounty.track.lower()
                if (
                    bounty_track == normalized
                    or bounty_track == ALL_TRACKS
                    or bounty_track in alternates
                    or normalized in self.track_aliases.get(bounty_track, [])
                ):
                    results.append(TrackBounty(sponsor, bounty))

        return results
