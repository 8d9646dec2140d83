"""
Sort orders for search results.

All orders use Python's stable sort, so records with equal keys keep their
incoming order (relevance order after a text query). Name orders compare
accent-folded, casefolded names, so "Éclair" sorts between "Alpha" and "Zeta".
"""
import unicodedata
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    # Type-only: core.config imports this module while records is still loading
    from .records import SearchableRecord


class SortKey(str, Enum):
    """Available result orderings."""
    PRIZE_DESC = "prize-desc"
    PRIZE_ASC = "prize-asc"
    AWARDS_DESC = "awards-desc"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"

    @property
    def label(self) -> str:
        return SORT_LABELS[self]


SORT_LABELS = {
    SortKey.PRIZE_DESC: "Highest Prize",
    SortKey.PRIZE_ASC: "Lowest Prize",
    SortKey.AWARDS_DESC: "Most Awards",
    SortKey.NAME_ASC: "Name A-Z",
    SortKey.NAME_DESC: "Name Z-A",
}


def fold_name(name: str) -> str:
    """Casefold and strip accents: "Éclair" -> "eclair"."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()


def name_key(record: "SearchableRecord") -> tuple[str, str]:
    """Collation key for name ordering; the casefolded name breaks ties."""
    name = record.display_name
    return fold_name(name), name.casefold()


# SortKey -> (key function, descending)
_ORDERINGS = {
    SortKey.PRIZE_DESC: (lambda r: r.total_award_value, True),
    SortKey.PRIZE_ASC: (lambda r: r.total_award_value, False),
    SortKey.AWARDS_DESC: (lambda r: r.award_count, True),
    SortKey.NAME_ASC: (name_key, False),
    SortKey.NAME_DESC: (name_key, True),
}


def sort_records(
    records: Iterable["SearchableRecord"],
    sort_key: SortKey | str
) -> list["SearchableRecord"]:
    """
    Return a new list ordered by sort_key.

    Args:
        records: Records to order (not modified)
        sort_key: SortKey or its string value, e.g. "prize-desc"
    """
    key_func, descending = _ORDERINGS[SortKey(sort_key)]
    return sorted(records, key=key_func, reverse=descending)
