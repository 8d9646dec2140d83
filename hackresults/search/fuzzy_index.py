"""
Weighted fuzzy text index over search records.

Typo-tolerant matching across project name, tagline, builders, hashtags,
sponsors and tracks, using rapidfuzz similarity scores.

Ranking:
1. Records where some field value equals the query
2. Records where some field value contains the query
3. Fuzzy-only matches
Within a tier the best weighted field score wins; ties keep input order.
"""
import logging
from dataclasses import dataclass
from typing import Sequence

from rapidfuzz import fuzz

from .records import SearchableRecord

logger = logging.getLogger(__name__)


# Field -> weight
DEFAULT_WEIGHTS: dict[str, float] = {
    "display_name": 2.0,
    "short_description": 1.0,
    "people_names": 1.5,
    "people_handles": 1.5,
    "tags": 1.0,
    "sponsor_names": 1.2,
    "track_names": 1.2,
}

DEFAULT_THRESHOLD = 0.3

# Match tiers
TIER_FUZZY = 0
TIER_SUBSTRING = 1
TIER_EXACT = 2


@dataclass
class SearchHit:
    """A matched record with its ranking details."""
    record: SearchableRecord
    tier: int
    score: float  # best weighted field similarity
    matched_field: str


def _normalize(text: str) -> str:
    return " ".join(text.casefold().split())


class FuzzyIndex:
    """
    In-memory fuzzy index built once per record list.

    Field values are normalized at build time so queries only pay for
    similarity scoring.
    """

    def __init__(
        self,
        records: Sequence[SearchableRecord],
        weights: dict[str, float] | None = None,
        threshold: float = DEFAULT_THRESHOLD
    ):
        """
        Build the index.

        Args:
            records: Records to index (order is used for tie-breaking)
            weights: Field name -> weight
            threshold: Distance threshold (0-1); a value matches when its
                similarity is at least 1 - threshold
        """
        self.records = records
        self.weights = dict(weights or DEFAULT_WEIGHTS)
        self.threshold = threshold
        self.min_similarity = 1.0 - threshold

        self._entries: list[list[tuple[str, float, list[str]]]] = [
            [
                (field_name, weight, self._field_values(record, field_name))
                for field_name, weight in self.weights.items()
            ]
            for record in records
        ]

        logger.debug(f"FuzzyIndex built over {len(records)} records")

    @staticmethod
    def _field_values(record: SearchableRecord, field_name: str) -> list[str]:
        value = getattr(record, field_name)
        if isinstance(value, str):
            values = [value]
        else:
            values = list(value)
        return [v for v in (_normalize(v) for v in values) if v]

    def _score_value(self, query: str, value: str) -> tuple[int, float]:
        """Return (tier, similarity 0-1) for one field value."""
        if value == query:
            return TIER_EXACT, 1.0
        if query in value:
            return TIER_SUBSTRING, 1.0
        if len(query) <= len(value):
            # Query as the pattern: best window or token subset of the value
            similarity = max(
                fuzz.partial_ratio(query, value),
                fuzz.token_set_ratio(query, value),
            )
        else:
            # A value shorter than the query must match it as a whole
            similarity = max(
                fuzz.ratio(query, value),
                fuzz.token_sort_ratio(query, value),
            )
        return TIER_FUZZY, similarity / 100.0

    def search(self, text: str, limit: int | None = None) -> list[SearchHit]:
        """
        Search the index.

        Args:
            text: Free-text query; blank queries return no hits
            limit: Maximum hits (None for all)

        Returns:
            Hits ordered best match first
        """
        query = _normalize(text)
        if not query:
            return []

        ranked: list[tuple[tuple[int, float, int], SearchHit]] = []
        for position, (record, fields) in enumerate(zip(self.records, self._entries)):
            best: SearchHit | None = None
            for field_name, weight, values in fields:
                for value in values:
                    tier, similarity = self._score_value(query, value)
                    if similarity < self.min_similarity:
                        continue
                    score = similarity * weight
                    if best is None or (tier, score) > (best.tier, best.score):
                        best = SearchHit(record, tier, score, field_name)
            if best is not None:
                ranked.append(((-best.tier, -best.score, position), best))

        ranked.sort(key=lambda item: item[0])
        hits = [hit for _, hit in ranked]
        if limit is not None:
            hits = hits[:limit]

        logger.debug(f"Fuzzy search '{text}': {len(hits)} hits")
        return hits

    def query(self, text: str) -> list[SearchableRecord]:
        """Ranked records matching the query."""
        return [hit.record for hit in self.search(text)]


class IndexMemo:
    """
    Holds the index for the current record list.

    The index is rebuilt only when a different list object is supplied, so
    repeated queries against the same dataset reuse one index.
    """

    def __init__(self, index_factory=FuzzyIndex, **index_kwargs):
        self.index_factory = index_factory
        self.index_kwargs = index_kwargs
        self._records: Sequence[SearchableRecord] | None = None
        self._index = None
        self.builds = 0

    def get(self, records: Sequence[SearchableRecord]):
        if self._index is None or records is not self._records:
            self._index = self.index_factory(records, **self.index_kwargs)
            self._records = records
            self.builds += 1
            logger.info(f"Search index rebuilt ({len(records)} records)")
        return self._index
