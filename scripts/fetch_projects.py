"""
Warm the Devfolio project cache.

Fetches every winning project listed in projects.json so the app and the
image generator start from cached responses.

Usage:
    python scripts/fetch_projects.py
    python scripts/fetch_projects.py --slug zcash-wallet --slug shielded-swap
"""
import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hackresults.core.config import get_settings, load_dotenv_if_exists
from hackresults.data.awards import AwardsRepository
from hackresults.data.files import DataFileError
from hackresults.scrapers.devfolio_client import DevfolioClient, extract_slug_from_url

load_dotenv_if_exists()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger("fetch_projects")


def main():
    parser = argparse.ArgumentParser(description="Fetch Devfolio details for winning projects")
    parser.add_argument(
        "--slug", action="append",
        help="Only fetch this project slug (repeatable)"
    )
    args = parser.parse_args()

    settings = get_settings()

    if args.slug:
        slugs = args.slug
    else:
        paths = settings.paths.resolve(settings.project_root)
        try:
            awards = AwardsRepository.from_file(paths.projects_json)
        except DataFileError as e:
            logger.error(str(e))
            sys.exit(1)
        slugs = [s for s in (extract_slug_from_url(p.url) for p in awards.get_all_projects()) if s]

    client = DevfolioClient.from_settings(settings)
    try:
        projects = client.fetch_projects(slugs)
    finally:
        client.close()

    missing = [s for s in slugs if s not in projects]
    for slug in missing:
        logger.warning(f"Not found: {slug}")

    logger.info(f"Cached {len(projects)}/{len(slugs)} projects")


if __name__ == "__main__":
    main()
