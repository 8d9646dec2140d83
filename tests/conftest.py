"""
Pytest configuration and fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from hackresults.core.schemas import (
    AwardsData,
    Builder,
    DevfolioProject,
    Hashtag,
    HashtagName,
    ProjectAward,
    ProjectWithAwards,
    SponsorsData,
)
from hackresults.search.records import build_search_record


def make_project(name, slug=None, tagline="", builders=(), hashtags=()):
    """DevfolioProject with builders given as (first, last, username) tuples."""
    return DevfolioProject(
        name=name,
        slug=slug or name.lower().replace(" ", "-"),
        tagline=tagline,
        builders=[Builder(first_name=f, last_name=l, username=u) for f, l, u in builders],
        hashtags=[Hashtag(hashtag=HashtagName(name=h)) for h in hashtags],
    )


def make_awards(name, total_usd=0, awards=()):
    """ProjectWithAwards with awards given as (sponsor, track, amount) tuples."""
    slug = name.lower().replace(" ", "-")
    return ProjectWithAwards(
        name=name,
        url=f"https://devfolio.co/projects/{slug}",
        awards=[ProjectAward(sponsor=s, track=t, amount=a) for s, t, a in awards],
        total_usd=total_usd,
    )


def make_record(name, total_usd=0, awards=(), **project_kwargs):
    return build_search_record(make_project(name, **project_kwargs), make_awards(name, total_usd, awards))


@pytest.fixture
def abc_records():
    """Three records: Beta has the top prize, Alpha and Gamma tie, only Gamma is sponsored by Acme."""
    return [
        make_record("Alpha", 500, [("Zeta Labs", "DeFi", "$500")]),
        make_record("Beta", 1500, [("Zeta Labs", "DeFi", "$1,000"), ("Orbit", "Payments", "$500")]),
        make_record("Gamma", 500, [("Acme", "Payments", "$500")]),
    ]


@pytest.fixture
def search_records():
    """A small realistic dataset for text search."""
    return [
        make_record(
            "ShieldSwap",
            8000,
            [("NEAR", "Cross-Chain Privacy Solutions", "$5,000"),
             ("Zcash Community Grants", "Private Payments & Transactions", "$3,000")],
            tagline="Private cross-chain swaps with shielded ZEC",
            builders=[("Ada", "Lovelace", "adal"), ("Grace", "Hopper", "ghopper")],
            hashtags=["zcash", "defi"],
        ),
        make_record(
            "Zwallet Lite",
            4000,
            [("Unstoppable Wallet", "Self-Custody & Wallet Innovation", "$4,000")],
            tagline="A light shielded wallet for mobile",
            builders=[("Linus", "Torvalds", "ltorvalds")],
            hashtags=["wallet", "mobile"],
        ),
        make_record(
            "Private Memos",
            3500,
            [("Aztec", "Privacy-Focused Content & Media", "$3,500")],
            tagline="Encrypted notes anchored on chain",
            builders=[("Barbara", "Liskov", "bliskov")],
            hashtags=["content"],
        ),
    ]


@pytest.fixture
def awards_data():
    """Parsed projects.json snapshot."""
    return AwardsData.model_validate({
        "meta": {"totalProjects": 3, "totalAwards": 5, "totalUSD": 12500},
        "projects": [
            {
                "name": "ShieldSwap",
                "url": "https://devfolio.co/projects/shieldswap",
                "awards": [
                    {"sponsor": "NEAR", "track": "Cross-Chain Privacy Solutions", "amount": "$5,000"},
                    {"sponsor": "ECC (Electric Coin Company)", "track": "Private Payments & Transactions",
                     "amount": "$3,000"},
                ],
                "totalUSD": 8000,
            },
            {
                "name": "Zwallet Lite",
                "url": "https://devfolio.co/projects/zwallet-lite",
                "awards": [
                    {"sponsor": "Near", "track": "Self-Custody & Wallet Innovation", "amount": "$4,000"},
                    {"sponsor": "Helius", "track": None, "amount": "$500 credits"},
                ],
                "totalUSD": 4000,
                "otherPrizes": ["Helius RPC credits"],
            },
            {
                "name": "Private Memos",
                "url": "https://devfolio.co/submissions/private-memos",
                "awards": [
                    {"sponsor": "Aztec", "track": "Private Payments & Transactions", "amount": "500"},
                ],
                "totalUSD": 500,
            },
        ],
    })


@pytest.fixture
def sponsors_data():
    """Parsed sponsors.json snapshot."""
    return SponsorsData.model_validate({
        "sponsors": [
            {
                "id": "near",
                "name": "NEAR",
                "displayName": "NEAR Protocol",
                "website": "https://near.org",
                "totalPrize": "$20,000",
                "bounties": [
                    {"track": "Cross-Chain", "amount": "$10,000", "description": "Cross-chain privacy"},
                    {"track": "All Tracks", "amount": "$10,000", "description": "Best use of NEAR"},
                ],
            },
            {
                "id": "ecc",
                "name": "Electric Coin Company",
                "displayName": "ECC",
                "website": "https://electriccoin.co",
                "totalPrize": "$15,000",
                "bounties": [
                    {"track": "Private Payments", "amount": "$15,000", "description": "Shielded payments"},
                ],
            },
            {
                "id": "helius",
                "name": "Helius",
                "displayName": "Helius",
                "website": "https://helius.dev",
                "bounties": None,
            },
        ],
    })


@pytest.fixture
def data_dir(tmp_path, awards_data, sponsors_data):
    """Directory holding projects.json and sponsors.json."""
    (tmp_path / "projects.json").write_text(awards_data.model_dump_json(by_alias=True), encoding="utf-8")
    (tmp_path / "sponsors.json").write_text(sponsors_data.model_dump_json(by_alias=True), encoding="utf-8")
    return tmp_path


@pytest.fixture
def record_factory():
    """make_record(name, total_usd, awards, **project_kwargs)."""
    return make_record


@pytest.fixture
def project_factory():
    """make_project(name, slug, tagline, builders, hashtags)."""
    return make_project


@pytest.fixture
def awards_factory():
    """make_awards(name, total_usd, awards)."""
    return make_awards
