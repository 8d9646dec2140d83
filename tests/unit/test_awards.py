"""
Unit tests for award amounts and the awards repository.
"""
import pytest

from hackresults.data.awards import AwardsRepository, format_amount, parse_amount
from hackresults.data.files import DataFileError


class TestAmounts:
    """Tests for parse_amount() / format_amount()."""

    @pytest.mark.parametrize("amount,expected", [
        ("$5,000", 5000),
        ("1,000", 1000),
        ("$750", 750),
        ("500 ZEC", 0),
        ("$500 credits", 0),
        ("NIL", 0),
        ("Pro Plan", 0),
        ("TBA", 0),
        ("", 0),
    ])
    def test_parse_amount(self, amount, expected):
        assert parse_amount(amount) == expected

    def test_format_amount(self):
        assert format_amount("5000") == "$5000"
        assert format_amount("$5,000") == "$5,000"
        assert format_amount("$100 credits") == "100 credits"
        assert format_amount("NIL") == "NIL"


class TestAwardsRepository:
    """Tests for AwardsRepository lookups."""

    @pytest.fixture
    def repo(self, awards_data):
        return AwardsRepository(awards_data)

    def test_meta(self, repo):
        meta = repo.get_meta()
        assert meta.total_projects == 3
        assert meta.total_usd == 12500

    def test_top_projects(self, repo):
        top = repo.get_top_projects(limit=2)
        assert [p.name for p in top] == ["ShieldSwap", "Zwallet Lite"]

    def test_project_by_slug_and_url(self, repo):
        assert repo.get_project_by_slug("private-memos").name == "Private Memos"
        assert repo.get_project_by_url("https://devfolio.co/projects/shieldswap").name == "ShieldSwap"
        assert repo.get_project_by_slug("missing") is None

    def test_all_sponsors_as_written_on_awards(self, repo):
        assert repo.get_all_sponsors() == [
            "Aztec", "ECC (Electric Coin Company)", "Helius", "NEAR", "Near",
        ]

    def test_projects_by_exact_sponsor(self, repo):
        assert [p.name for p in repo.get_projects_by_sponsor("NEAR")] == ["ShieldSwap"]

    def test_flexible_sponsor_matching(self, repo):
        matches = repo.get_projects_with_awards_from_sponsor(["near", "NEAR Protocol"])

        assert [m.project.name for m in matches] == ["ShieldSwap", "Zwallet Lite"]
        # Only the matching award is kept
        assert [a.sponsor for a in matches[0].awards] == ["NEAR"]
        assert matches[0].usd == 5000

    def test_partial_sponsor_name(self, repo):
        matches = repo.get_projects_with_awards_from_sponsor(["Electric Coin Company"])
        assert [m.project.name for m in matches] == ["ShieldSwap"]

    def test_tracks(self, repo):
        assert repo.get_all_tracks() == [
            "Cross-Chain Privacy Solutions",
            "Private Payments & Transactions",
            "Self-Custody & Wallet Innovation",
        ]

    def test_projects_by_track_case_insensitive(self, repo):
        matches = repo.get_projects_by_track("private payments & transactions")

        assert [m.project.name for m in matches] == ["ShieldSwap", "Private Memos"]
        assert [m.usd for m in matches] == [3000, 500]


class TestLoading:
    """Tests for loading projects.json."""

    def test_from_file(self, data_dir):
        repo = AwardsRepository.from_file(data_dir / "projects.json")
        assert len(repo.get_all_projects()) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataFileError) as exc_info:
            AwardsRepository.from_file(tmp_path / "nope.json")
        assert exc_info.value.path == tmp_path / "nope.json"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "projects.json"
        path.write_text('{"projects": [{"name": "No URL"}]}', encoding="utf-8")

        with pytest.raises(DataFileError):
            AwardsRepository.from_file(path)
