"""
Unit tests for search record normalization.
"""
from hackresults.search.records import (
    all_sponsors,
    all_tags,
    all_tracks,
    build_search_record,
    build_search_records,
)


class TestBuildSearchRecord:
    """Tests for build_search_record()."""

    def test_flattens_project_and_awards(self, project_factory, awards_factory):
        project = project_factory(
            "ShieldSwap",
            tagline="Private swaps",
            builders=[("Ada", "Lovelace", "adal"), (None, None, "anon")],
            hashtags=["zcash", "defi"],
        )
        awards = awards_factory("ShieldSwap", 8000, [
            ("NEAR", "Cross-Chain", "$5,000"),
            ("NEAR", "Payments", "$2,000"),
            ("ZCG", "Payments", "$1,000"),
        ])

        record = build_search_record(project, awards)

        assert record.id == "shieldswap"
        assert record.display_name == "ShieldSwap"
        assert record.short_description == "Private swaps"
        assert record.people_names == ("Ada Lovelace",)
        assert record.people_handles == ("adal", "anon")
        assert record.tags == ("zcash", "defi")
        assert record.total_award_value == 8000
        assert record.award_count == 3

    def test_sponsors_and_tracks_deduplicated_in_first_seen_order(self, project_factory, awards_factory):
        awards = awards_factory("X", 0, [
            ("NEAR", "Payments", "$1"),
            ("Aztec", None, "$1"),
            ("NEAR", "Cross-Chain", "$1"),
            ("Aztec", "Payments", "$1"),
        ])

        record = build_search_record(project_factory("X"), awards)

        assert record.sponsor_names == ("NEAR", "Aztec")
        assert record.track_names == ("Payments", "Cross-Chain")

    def test_missing_award_record_gives_zero_totals(self, project_factory):
        record = build_search_record(project_factory("Lonely", tagline=None))

        assert record.total_award_value == 0
        assert record.award_count == 0
        assert record.sponsor_names == ()
        assert record.track_names == ()
        assert record.short_description == ""

    def test_build_many_preserves_order(self, project_factory, awards_factory):
        pairs = [
            (project_factory("B"), awards_factory("B", 10)),
            (project_factory("A"), None),
        ]

        records = build_search_records(pairs)

        assert [r.display_name for r in records] == ["B", "A"]
        assert records[1].award_record is None


class TestFilterOptions:
    """Tests for the sorted option accessors."""

    def test_all_sponsors_sorted_unique(self, abc_records):
        assert all_sponsors(abc_records) == ["Acme", "Orbit", "Zeta Labs"]

    def test_all_tracks_sorted_unique(self, abc_records):
        assert all_tracks(abc_records) == ["DeFi", "Payments"]

    def test_all_tags(self, search_records):
        assert all_tags(search_records) == ["content", "defi", "mobile", "wallet", "zcash"]

    def test_empty(self):
        assert all_sponsors([]) == []
        assert all_tracks([]) == []
