"""
Unit tests for sponsor lookups and bounty matching.
"""
import pytest

from hackresults.data.sponsors import SponsorDirectory


@pytest.fixture
def directory(sponsors_data):
    return SponsorDirectory(sponsors_data)


class TestSponsorLookup:
    """Tests for resolving award sponsor names."""

    def test_by_id(self, directory):
        assert directory.get_sponsor_by_id("ecc").name == "Electric Coin Company"
        assert directory.get_sponsor_by_id("missing") is None

    def test_by_display_name(self, directory):
        assert directory.get_sponsor_by_name("near protocol").id == "near"

    def test_alias_table(self, directory):
        assert directory.get_sponsor_for_award("ECC (Electric Coin Company)").id == "ecc"
        assert directory.get_sponsor_for_award("Near").id == "near"

    def test_partial_name_without_aliases(self, sponsors_data):
        directory = SponsorDirectory(sponsors_data, name_aliases={})

        assert directory.get_sponsor_for_award("ECC (Electric Coin Company)").id == "ecc"

    def test_unknown_sponsor(self, directory):
        assert directory.get_sponsor_for_award("Unknown Co") is None
        assert directory.get_sponsor_website("Unknown Co") is None

    def test_website(self, directory):
        assert directory.get_sponsor_website("Helius") == "https://helius.dev"

    def test_sponsors_with_prizes(self, directory):
        assert [s.id for s in directory.get_sponsors_with_prizes()] == ["near", "ecc"]


class TestBounties:
    """Tests for bounty and track matching."""

    def test_partial_track_match(self, directory):
        bounty = directory.get_bounty_for_award("NEAR", "Cross-Chain Privacy Solutions")
        assert bounty.track == "Cross-Chain"

    def test_falls_back_to_all_tracks(self, directory):
        bounty = directory.get_bounty_for_award("NEAR", "Gaming")
        assert bounty.track == "All Tracks"

    def test_no_track_gives_first_bounty(self, directory):
        assert directory.get_bounty_for_award("NEAR").track == "Cross-Chain"

    def test_sponsor_without_bounties(self, directory):
        assert directory.get_bounty_for_award("Helius", "Anything") is None

    def test_all_tracks_excludes_catch_all(self, directory):
        assert directory.get_all_tracks() == ["Cross-Chain", "Private Payments"]

    def test_sponsors_for_track_uses_aliases(self, directory):
        results = directory.get_sponsors_for_track("Private Payments & Transactions")

        assert [(r.sponsor.id, r.bounty.track) for r in results] == [
            ("near", "All Tracks"),
            ("ecc", "Private Payments"),
        ]

    def test_custom_track_aliases(self, sponsors_data):
        directory = SponsorDirectory(sponsors_data, track_aliases={"bridges": ["cross-chain"]})

        results = directory.get_sponsors_for_track("Bridges")

        assert [r.bounty.track for r in results] == ["Cross-Chain", "All Tracks"]
