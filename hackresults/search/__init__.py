"""
Search module - Project records, fuzzy matching, filtering and sorting.

Provides:
- SearchableRecord: Flattened project + awards record
- FuzzyIndex: Weighted typo-tolerant text index (rapidfuzz)
- FilterSelection / filter_records: Sponsor, track and prize filters
- SortKey / sort_records: Stable result orderings
- SearchController: Query pipeline that republishes results on every change
"""
from .records import (
    SearchableRecord,
    build_search_record,
    build_search_records,
    all_sponsors,
    all_tracks,
    all_tags,
)
from .fuzzy_index import FuzzyIndex, IndexMemo, SearchHit
from .filters import FilterSelection, filter_records
from .sorting import SortKey, sort_records
from .controller import SearchController

__all__ = [
    "SearchableRecord",
    "build_search_record",
    "build_search_records",
    "all_sponsors",
    "all_tracks",
    "all_tags",
    "FuzzyIndex",
    "IndexMemo",
    "SearchHit",
    "FilterSelection",
    "filter_records",
    "SortKey",
    "sort_records",
    "SearchController",
]
