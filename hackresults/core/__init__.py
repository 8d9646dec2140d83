"""
Core module - Configuration and schemas.
"""
from .config import Settings, get_settings
from .schemas import (
    Builder,
    Hashtag,
    DescriptionBlock,
    DevfolioProject,
    ProjectAward,
    ProjectWithAwards,
    AwardsMeta,
    AwardsData,
    SponsorBounty,
    Sponsor,
    SponsorsData,
)

__all__ = [
    "Settings",
    "get_settings",
    "Builder",
    "Hashtag",
    "DescriptionBlock",
    "DevfolioProject",
    "ProjectAward",
    "ProjectWithAwards",
    "AwardsMeta",
    "AwardsData",
    "SponsorBounty",
    "Sponsor",
    "SponsorsData",
]
