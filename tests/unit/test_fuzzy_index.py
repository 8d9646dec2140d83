"""
Unit tests for the weighted fuzzy text index.
"""
import pytest

from hackresults.search.fuzzy_index import (
    FuzzyIndex,
    IndexMemo,
    TIER_EXACT,
    TIER_FUZZY,
    TIER_SUBSTRING,
)


def names(records):
    return [r.display_name for r in records]


class TestFuzzyIndex:
    """Tests for FuzzyIndex.search() / query()."""

    def test_exact_name_ranks_first(self, search_records):
        index = FuzzyIndex(search_records)

        results = index.query("Private Memos")

        assert results[0].display_name == "Private Memos"

    def test_case_insensitive(self, search_records):
        index = FuzzyIndex(search_records)

        assert index.query("SHIELDSWAP")[0].display_name == "ShieldSwap"

    def test_typo_tolerant(self, search_records):
        index = FuzzyIndex(search_records)

        hits = index.search("shieldswp")

        assert hits[0].record.display_name == "ShieldSwap"
        assert hits[0].tier == TIER_FUZZY
        assert hits[0].matched_field == "display_name"

    def test_matches_builder_handle(self, search_records):
        index = FuzzyIndex(search_records)

        hit = index.search("ltorvalds")[0]

        assert hit.record.display_name == "Zwallet Lite"
        assert hit.tier == TIER_EXACT
        assert hit.matched_field == "people_handles"

    def test_matches_builder_full_name(self, search_records):
        index = FuzzyIndex(search_records)

        assert index.query("grace hopper")[0].display_name == "ShieldSwap"

    def test_matches_sponsor_and_track(self, search_records):
        index = FuzzyIndex(search_records)

        assert index.query("Aztec")[0].display_name == "Private Memos"
        assert index.query("Self-Custody & Wallet Innovation")[0].display_name == "Zwallet Lite"

    def test_blank_query_returns_nothing(self, search_records):
        index = FuzzyIndex(search_records)

        assert index.query("") == []
        assert index.query("   ") == []

    def test_unrelated_query_returns_nothing(self, search_records):
        index = FuzzyIndex(search_records)

        assert index.query("qqqqxxxxjjjj") == []

    def test_tiers_outrank_input_order(self, record_factory):
        records = [
            record_factory("Walet Tools"),
            record_factory("My Wallet"),
            record_factory("Wallet"),
        ]
        index = FuzzyIndex(records)

        hits = index.search("wallet")

        assert names(h.record for h in hits) == ["Wallet", "My Wallet", "Walet Tools"]
        assert [h.tier for h in hits] == [TIER_EXACT, TIER_SUBSTRING, TIER_FUZZY]

    def test_field_weight_breaks_tier_ties(self, record_factory):
        records = [
            record_factory("Ferris", tagline="built with rust"),
            record_factory("Rust Box"),
        ]
        index = FuzzyIndex(records)

        assert names(index.query("rust")) == ["Rust Box", "Ferris"]

    def test_equal_scores_keep_input_order(self, record_factory):
        records = [
            record_factory("Beta", tagline="tooling for zk proofs"),
            record_factory("Alpha", tagline="tooling for zk proofs"),
        ]
        index = FuzzyIndex(records)

        assert names(index.query("zk proofs")) == ["Beta", "Alpha"]

    def test_short_value_inside_query_is_not_a_match(self, record_factory):
        records = [
            record_factory("Alpha", hashtags=["ai"]),
            record_factory("Blockchain Explorer"),
        ]
        index = FuzzyIndex(records)

        assert names(index.query("blockchain")) == ["Blockchain Explorer"]

    def test_short_handle_inside_query_is_not_a_match(self, record_factory):
        records = [record_factory("Zed Tools", builders=[("Li", "Wu", "li")])]
        index = FuzzyIndex(records)

        assert index.query("lightning") == []

    def test_zero_threshold_only_accepts_substrings(self, search_records):
        index = FuzzyIndex(search_records, threshold=0.0)

        assert index.query("shieldswp") == []
        assert names(index.query("shieldswap")) == ["ShieldSwap"]

    def test_limit(self, record_factory):
        records = [record_factory(f"Wallet {i}") for i in range(5)]
        index = FuzzyIndex(records)

        assert len(index.search("wallet", limit=2)) == 2

    def test_custom_weights_restrict_fields(self, search_records):
        index = FuzzyIndex(search_records, weights={"display_name": 1.0})

        assert index.query("ltorvalds") == []


class TestIndexMemo:
    """Tests for IndexMemo reuse."""

    def test_reuses_index_for_same_list(self, search_records):
        memo = IndexMemo()

        first = memo.get(search_records)
        second = memo.get(search_records)

        assert first is second
        assert memo.builds == 1

    def test_rebuilds_for_new_list(self, search_records):
        memo = IndexMemo()
        memo.get(search_records)

        memo.get(list(search_records))

        assert memo.builds == 2

    def test_passes_index_kwargs(self, search_records):
        memo = IndexMemo(threshold=0.1)

        assert memo.get(search_records).threshold == pytest.approx(0.1)
