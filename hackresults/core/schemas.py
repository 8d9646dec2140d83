"""
Pydantic schemas for hackathon results data.

Field aliases mirror the keys used by the Devfolio GraphQL API and by the
extracted projects.json / sponsors.json snapshots.
"""
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# ============================================================
# Devfolio project data
# ============================================================

class Builder(_Model):
    """A team member on a Devfolio project."""
    first_name: str | None = None
    last_name: str | None = None
    username: str = ""
    profile_image: str | None = Field(None, alias="_profile_image")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class HashtagName(_Model):
    name: str


class Hashtag(_Model):
    """Wrapper matching Devfolio's `hashtags { hashtag { name } }` shape."""
    hashtag: HashtagName


class DescriptionBlock(_Model):
    """One question/answer block of a project description (markdown content)."""
    title: str = ""
    content: str = ""
    subtitle: str | None = None


class DevfolioProject(_Model):
    """A project as returned by the Devfolio API."""
    name: str
    slug: str
    tagline: str | None = None
    description: list[DescriptionBlock] | None = None
    cover_img: str | None = Field(None, alias="_cover_img")
    favicon: str | None = Field(None, alias="_favicon")
    video_url: str | None = None
    demo_url: str | None = None
    source_code_url: str | None = None
    links: str | None = Field(None, description="Comma separated URLs")
    pictures: str | None = Field(None, description="Comma separated asset paths")
    created_at: str | None = None
    builders: list[Builder] = Field(default_factory=list)
    hashtags: list[Hashtag] = Field(default_factory=list)


# ============================================================
# Awards (projects.json)
# ============================================================

class ProjectAward(_Model):
    """A single award won by a project."""
    sponsor: str
    track: str | None = None
    amount: str = Field(..., description="Display amount, e.g. '$5,000' or '500 ZEC'")


class ProjectWithAwards(_Model):
    """A winning project and every award it received."""
    name: str
    url: str
    awards: list[ProjectAward] = Field(default_factory=list)
    total_usd: float = Field(default=0, ge=0, alias="totalUSD")
    other_prizes: list[str] = Field(default_factory=list, alias="otherPrizes")


class AwardsMeta(_Model):
    total_projects: int = Field(0, alias="totalProjects")
    total_awards: int = Field(0, alias="totalAwards")
    total_usd: float = Field(0, alias="totalUSD")


class AwardsData(_Model):
    """Root of projects.json."""
    meta: AwardsMeta = Field(default_factory=AwardsMeta)
    projects: list[ProjectWithAwards] = Field(default_factory=list)


# ============================================================
# Sponsors (sponsors.json)
# ============================================================

class SponsorBounty(_Model):
    """A prize a sponsor offered for a track."""
    track: str
    amount: str = ""
    type: Literal["general", "project-specific"] = "general"
    description: str = ""
    prizes: list[str] | None = None


class Sponsor(_Model):
    id: str
    name: str
    display_name: str = Field(..., alias="displayName")
    website: str = ""
    logo: str = ""
    total_prize: str | None = Field(None, alias="totalPrize")
    prize_note: str = Field("", alias="prizeNote")
    description: str = ""
    bounties: list[SponsorBounty] | None = None


class SponsorsData(_Model):
    """Root of sponsors.json."""
    sponsors: list[Sponsor] = Field(default_factory=list)
