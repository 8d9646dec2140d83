"""
Devfolio GraphQL API client for project details.

Provides:
- Project lookup by slug (name, tagline, description, media, builders, hashtags)
- Batched fetching with a pause between batches
- Optional on-disk response cache
- URL helpers for Devfolio assets and project links
"""
import logging
import re
import time

import httpx
from diskcache import Cache
from pydantic import ValidationError

from ..core.schemas import DevfolioProject

logger = logging.getLogger(__name__)

DEVFOLIO_API = "https://api.devfolio.co/v1/graphql"
DEVFOLIO_ASSETS = "https://assets.devfolio.co"

PROJECT_QUERY = """
  query GetProject($slug: citext!) {
    projects(where: {slug: {_eq: $slug}}) {
      name
      slug
      tagline
      description
      _cover_img
      _favicon
      video_url
      demo_url
      source_code_url
      links
      pictures
      created_at
      builders {
        first_name
        last_name
        username
        _profile_image
      }
      hashtags {
        hashtag {
          name
        }
      }
    }
  }
"""

_SLUG_RE = re.compile(r"devfolio\.co/(?:projects|submissions)/([^/?]+)")


class DevfolioClient:
    """
    Client for the Devfolio GraphQL API.

    Failures are logged and reported as missing projects; nothing is raised
    to callers.
    """

    def __init__(
        self,
        api_url: str = DEVFOLIO_API,
        batch_size: int = 10,
        batch_delay: float = 0.1,
        timeout: float = 30.0,
        cache_dir: str | None = None,
        http_client: httpx.Client | None = None
    ):
        """
        Initialize Devfolio client.

        Args:
            api_url: GraphQL endpoint
            batch_size: Slugs fetched per batch in fetch_projects()
            batch_delay: Seconds to wait between batches
            timeout: Request timeout in seconds
            cache_dir: Directory for caching responses (None disables caching)
            http_client: Preconfigured httpx client (used by tests)
        """
        self.api_url = api_url
        self.batch_size = max(1, batch_size)
        self.batch_delay = batch_delay
        self._client = http_client or httpx.Client(
            timeout=timeout,
            headers={"User-Agent": "HackResults/0.3.0"},
        )

        if cache_dir:
            self.cache = Cache(cache_dir)
        else:
            self.cache = None

        logger.info(f"DevfolioClient initialized (cache={'enabled' if cache_dir else 'disabled'})")

    @classmethod
    def from_settings(cls, settings) -> "DevfolioClient":
        """Build a client from Settings (devfolio + paths groups)."""
        return cls(
            api_url=settings.devfolio.api_url,
            batch_size=settings.devfolio.batch_size,
            batch_delay=settings.devfolio.batch_delay,
            timeout=settings.devfolio.timeout,
            cache_dir=str(settings.paths.resolve(settings.project_root).data_cache / "devfolio"),
        )

    def fetch_project(self, slug: str) -> DevfolioProject | None:
        """
        Fetch a single project.

        Args:
            slug: Devfolio project slug

        Returns:
            DevfolioProject or None if not found or the request failed
        """
        cache_key = f"devfolio:project:{slug}"
        if self.cache is not None and cache_key in self.cache:
            logger.debug(f"Cache hit for project: {slug}")
            return DevfolioProject.model_validate(self.cache[cache_key])

        try:
            response = self._client.post(
                self.api_url,
                json={"query": PROJECT_QUERY, "variables": {"slug": slug}},
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to fetch project {slug}: {e}")
            return None

        if payload.get("errors"):
            logger.warning(f"Devfolio returned errors for {slug}: {payload['errors']}")

        projects = ((payload.get("data") or {}).get("projects")) or []
        if not projects:
            logger.debug(f"Project not found on Devfolio: {slug}")
            return None

        try:
            project = DevfolioProject.model_validate(projects[0])
        except ValidationError as e:
            logger.error(f"Unexpected Devfolio payload for {slug}: {e}")
            return None

        if self.cache is not None:
            self.cache[cache_key] = projects[0]

        return project

    def fetch_projects(self, slugs: list[str]) -> dict[str, DevfolioProject]:
        """
        Fetch many projects in batches.

        Args:
            slugs: Project slugs

        Returns:
            slug -> project for every project that was found
        """
        results: dict[str, DevfolioProject] = {}

        for start in range(0, len(slugs), self.batch_size):
            batch = slugs[start:start + self.batch_size]
            for slug in batch:
                project = self.fetch_project(slug)
                if project:
                    results[slug] = project

            # Small delay between batches
            if start + self.batch_size < len(slugs) and self.batch_delay > 0:
                time.sleep(self.batch_delay)

        logger.info(f"Fetched {len(results)}/{len(slugs)} Devfolio projects")
        return results

    def close(self):
        self._client.close()
        if self.cache is not None:
            self.cache.close()


# --------------------------------------------------------
# URL helpers
# --------------------------------------------------------

def extract_slug_from_url(url: str) -> str | None:
    """Project slug from a devfolio.co/projects/<slug> or /submissions/<slug> URL."""
    match = _SLUG_RE.search(url)
    return match.group(1) if match else None


def get_image_url(path: str | None, assets_url: str = DEVFOLIO_ASSETS) -> str | None:
    """Absolute URL for a Devfolio asset path."""
    if not path:
        return None
    if path.startswith("http"):
        return path
    return f"{assets_url}/{path}"


def get_pictures(pictures: str | None, assets_url: str = DEVFOLIO_ASSETS) -> list[str]:
    """Split the comma separated pictures field into absolute URLs."""
    if not pictures:
        return []
    urls = (get_image_url(p.strip(), assets_url) for p in pictures.split(","))
    return [u for u in urls if u]


def get_links(links: str | None) -> list[str]:
    """Split the comma separated links field."""
    if not links:
        return []
    return [link.strip() for link in links.split(",") if link.strip()]
