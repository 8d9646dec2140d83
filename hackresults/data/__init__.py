"""
Data module - Award and sponsor snapshots, alias tables, dataset assembly.
"""
from .files import DataFileError, load_json_model
from .awards import AwardsRepository, AwardMatch, parse_amount, format_amount, awards_usd
from .sponsors import SponsorDirectory, TrackBounty
from .grouping import slugify_track, sort_by_prize, group_by_track, group_by_sponsor, sponsor_winners
from .dataset import Dataset, load_dataset, pair_projects, fallback_project

__all__ = [
    "DataFileError",
    "load_json_model",
    "AwardsRepository",
    "AwardMatch",
    "parse_amount",
    "format_amount",
    "awards_usd",
    "SponsorDirectory",
    "TrackBounty",
    "slugify_track",
    "sort_by_prize",
    "group_by_track",
    "group_by_sponsor",
    "sponsor_winners",
    "Dataset",
    "load_dataset",
    "pair_projects",
    "fallback_project",
]
