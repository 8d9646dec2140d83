"""
Central configuration management for HackResults.

Loads settings from environment variables and provides typed access.
"""
from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from ..search.sorting import SortKey


class DevfolioSettings(BaseSettings):
    """Devfolio GraphQL API configuration."""
    api_url: str = Field(default="https://api.devfolio.co/v1/graphql", alias="DEVFOLIO_API_URL")
    assets_url: str = Field(default="https://assets.devfolio.co", alias="DEVFOLIO_ASSETS_URL")
    batch_size: int = Field(default=10, alias="DEVFOLIO_BATCH_SIZE")
    batch_delay: float = Field(
        default=0.1,
        alias="DEVFOLIO_BATCH_DELAY",
        description="Seconds to wait between request batches"
    )
    timeout: float = Field(default=30.0, alias="DEVFOLIO_TIMEOUT")


class SearchSettings(BaseSettings):
    """Project search configuration.

    threshold is a distance: 0.0 only accepts perfect matches, 1.0 accepts
    anything. A field value matches when its similarity is >= 1 - threshold.
    """
    threshold: float = Field(default=0.3, ge=0.0, le=1.0, alias="SEARCH_THRESHOLD")
    default_sort: SortKey = Field(default=SortKey.PRIZE_DESC, alias="SEARCH_DEFAULT_SORT")


class OgSettings(BaseSettings):
    """Social preview image configuration."""
    width: int = Field(default=1200, alias="OG_WIDTH")
    height: int = Field(default=630, alias="OG_HEIGHT")
    fonts_dir: Path = Field(default=Path("assets/fonts"), alias="OG_FONTS_DIR")
    brand_text: str = Field(default="zypherpunk.d4mr.com", alias="OG_BRAND_TEXT")
    badge_prefix: str = Field(default="Zypherpunk", alias="OG_BADGE_PREFIX")
    image_timeout: float = Field(default=5.0, alias="OG_IMAGE_TIMEOUT")


class PathSettings(BaseSettings):
    """Path configuration."""
    projects_json: Path = Field(default=Path("data/projects.json"), alias="PROJECTS_JSON")
    sponsors_json: Path = Field(default=Path("data/sponsors.json"), alias="SPONSORS_JSON")
    data_cache: Path = Field(default=Path("data/cache"), alias="DATA_CACHE_PATH")
    og_output: Path = Field(default=Path("dist/og"), alias="OG_OUTPUT_PATH")

    def resolve(self, base_dir: Path) -> "PathSettings":
        """Resolve relative paths against base directory."""
        return self.model_copy(update={
            "projects_json": base_dir / self.projects_json,
            "sponsors_json": base_dir / self.sponsors_json,
            "data_cache": base_dir / self.data_cache,
            "og_output": base_dir / self.og_output,
        })


class Settings(BaseSettings):
    """Main settings aggregator."""
    devfolio: DevfolioSettings = Field(default_factory=DevfolioSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    og: OgSettings = Field(default_factory=OgSettings)
    paths: PathSettings = Field(default_factory=PathSettings)

    # Project root
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings():
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


# Convenience function
def load_dotenv_if_exists():
    """Load .env file from the project root if it exists."""
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
