"""
HackResults social preview image generator.

Renders a 1200x630 PNG for every project, sponsor and track:
  - og/project/<slug>.png
  - og/sponsor/<id>.png
  - og/track/<track-slug>.png

Usage:
    python scripts/generate_og.py                      # Write to OG_OUTPUT_PATH
    python scripts/generate_og.py --out dist/og        # Custom output directory
    python scripts/generate_og.py --only project       # Projects only
    python scripts/generate_og.py --offline            # Skip Devfolio, use award data only
"""
import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hackresults.core.config import get_settings, load_dotenv_if_exists
from hackresults.data.dataset import Dataset, load_dataset
from hackresults.data.files import DataFileError
from hackresults.data.grouping import slugify_track
from hackresults.og.cards import project_card, sponsor_card, track_card
from hackresults.og.renderer import OgImageRenderer
from hackresults.scrapers.devfolio_client import DevfolioClient

load_dotenv_if_exists()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger("generate_og")

KINDS = ("project", "sponsor", "track")


def _write(path: Path, data: bytes):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def generate(
    dataset: Dataset,
    renderer: OgImageRenderer,
    out_dir: Path,
    kinds: tuple[str, ...] = KINDS,
    badge_prefix: str = "Zypherpunk"
) -> dict[str, int]:
    """
    Render every card of the requested kinds.

    Returns:
        kind -> number of images written
    """
    counts = {kind: 0 for kind in kinds}

    if "project" in kinds:
        for project, award_record in dataset.pairs:
            options = project_card(project.slug, award_record, project, badge_prefix)
            _write(out_dir / "project" / f"{project.slug}.png", renderer.render(options))
            counts["project"] += 1

    if "sponsor" in kinds:
        for sponsor in dataset.sponsors.get_all_sponsors():
            options = sponsor_card(sponsor, dataset.awards, badge_prefix)
            _write(out_dir / "sponsor" / f"{sponsor.id}.png", renderer.render(options))
            counts["sponsor"] += 1

    if "track" in kinds:
        tracks = dict.fromkeys(dataset.awards.get_all_tracks() + dataset.sponsors.get_all_tracks())
        for track in tracks:
            options = track_card(track, dataset.awards, dataset.sponsors, badge_prefix)
            _write(out_dir / "track" / f"{slugify_track(track)}.png", renderer.render(options))
            counts["track"] += 1

    return counts


def main():
    parser = argparse.ArgumentParser(
        description="HackResults OG image generator - Render social preview cards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/generate_og.py                   # All cards
  python scripts/generate_og.py --only sponsor    # Sponsor cards only
  python scripts/generate_og.py --offline         # No Devfolio requests
        """
    )
    parser.add_argument(
        "--out", type=Path, default=None,
        help="Output directory (default: OG_OUTPUT_PATH)"
    )
    parser.add_argument(
        "--only", choices=KINDS, action="append",
        help="Card kind to render (repeatable, default: all)"
    )
    parser.add_argument(
        "--offline", action="store_true",
        help="Skip Devfolio and build project cards from award data only"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug logging"
    )

    args = parser.parse_args()
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    settings = get_settings()
    out_dir = args.out or settings.paths.resolve(settings.project_root).og_output

    client = None if args.offline else DevfolioClient.from_settings(settings)
    try:
        dataset = load_dataset(settings, client)
    except DataFileError as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        if client is not None:
            client.close()

    renderer = OgImageRenderer.from_settings(settings)
    start_time = time.time()
    try:
        counts = generate(
            dataset,
            renderer,
            out_dir,
            kinds=tuple(args.only or KINDS),
            badge_prefix=settings.og.badge_prefix,
        )
    finally:
        renderer.images.close()

    summary = ", ".join(f"{n} {kind}" for kind, n in counts.items())
    logger.info(f"Wrote {summary} images to {out_dir} in {time.time() - start_time:.1f}s")


if __name__ == "__main__":
    main()
