"""
Search controller: query text + filters + sort -> published result list.

Every state change re-runs the full pipeline synchronously:
1. Fuzzy ranking for a non-blank query, else all records in original order
2. Sponsor / track / prize filters
3. Sort
4. Publish to listeners (replaces the previous result list)
"""
import logging
import time
from typing import Callable, Sequence

from .filters import FilterSelection, filter_records
from .fuzzy_index import FuzzyIndex, IndexMemo, DEFAULT_THRESHOLD
from .records import SearchableRecord, all_sponsors, all_tracks
from .sorting import SortKey, sort_records

logger = logging.getLogger(__name__)

ResultsListener = Callable[[list[SearchableRecord]], None]


class SearchController:
    """
    Owns the search state for one record list and republishes results.

    The record list is treated as immutable; the fuzzy index is reused until
    set_records() is given a different list.
    """

    def __init__(
        self,
        records: Sequence[SearchableRecord],
        sort_key: SortKey | str = SortKey.PRIZE_DESC,
        threshold: float = DEFAULT_THRESHOLD,
        index_factory=FuzzyIndex
    ):
        """
        Initialize the controller and publish the initial result list.

        Args:
            records: Search records for the dataset
            sort_key: Initial sort order
            threshold: Fuzzy match distance threshold
            index_factory: Callable building an index with a query(text) method
        """
        self._memo = IndexMemo(index_factory, threshold=threshold)
        self._listeners: list[ResultsListener] = []

        self.records = records
        self.query = ""
        self.sort_key = SortKey(sort_key)
        self.selection = FilterSelection()
        self.results: list[SearchableRecord] = []

        self._refresh()

    # --------------------------------------------------------
    # Listeners
    # --------------------------------------------------------

    def subscribe(self, listener: ResultsListener) -> Callable[[], None]:
        """Register a results listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --------------------------------------------------------
    # Triggers
    # --------------------------------------------------------

    def set_records(self, records: Sequence[SearchableRecord]) -> list[SearchableRecord]:
        """Swap in a new dataset."""
        self.records = records
        return self._refresh()

    def set_query(self, text: str) -> list[SearchableRecord]:
        self.query = text
        return self._refresh()

    def set_sort(self, sort_key: SortKey | str) -> list[SearchableRecord]:
        self.sort_key = SortKey(sort_key)
        return self._refresh()

    def toggle_sponsor(self, sponsor: str) -> list[SearchableRecord]:
        """Select the sponsor, or deselect it if already selected."""
        self.selection = self.selection.toggle_sponsor(sponsor)
        return self._refresh()

    def toggle_track(self, track: str) -> list[SearchableRecord]:
        """Select the track, or deselect it if already selected."""
        self.selection = self.selection.toggle_track(track)
        return self._refresh()

    def set_prize_range(
        self,
        min_prize: float | None = None,
        max_prize: float | None = None
    ) -> list[SearchableRecord]:
        self.selection = self.selection.with_prize_range(min_prize, max_prize)
        return self._refresh()

    def clear_filters(self) -> list[SearchableRecord]:
        """Reset query and filters. The sort order is kept."""
        self.selection = FilterSelection()
        self.query = ""
        return self._refresh()

    # --------------------------------------------------------
    # Derived state
    # --------------------------------------------------------

    @property
    def index(self):
        return self._memo.get(self.records)

    @property
    def available_sponsors(self) -> list[str]:
        return all_sponsors(self.records)

    @property
    def available_tracks(self) -> list[str]:
        return all_tracks(self.records)

    @property
    def active_filter_count(self) -> int:
        return len(self.selection.sponsors) + len(self.selection.tracks)

    def is_selected_sponsor(self, sponsor: str) -> bool:
        return sponsor in self.selection.sponsors

    def is_selected_track(self, track: str) -> bool:
        return track in self.selection.tracks

    # --------------------------------------------------------
    # Pipeline
    # --------------------------------------------------------

    def run(self) -> list[SearchableRecord]:
        """Compute results for the current state without publishing."""
        if self.query.strip():
            candidates = self.index.query(self.query)
        else:
            candidates = list(self.records)

        candidates = filter_records(candidates, self.selection)
        return sort_records(candidates, self.sort_key)

    def _refresh(self) -> list[SearchableRecord]:
        start_time = time.time()
        self.results = self.run()

        logger.debug(
            f"Search '{self.query}' sort={self.sort_key.value} "
            f"sponsors={sorted(self.selection.sponsors)} tracks={sorted(self.selection.tracks)}: "
            f"{len(self.results)}/{len(self.records)} in {(time.time() - start_time) * 1000:.1f}ms"
        )

        for listener in list(self._listeners):
            listener(self.results)
        return self.results
