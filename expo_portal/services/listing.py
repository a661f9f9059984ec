"""Filtering and sorting for in-memory listings.

Both the public project catalogue and the admin review queue load their rows
first and then narrow them here. ``filter_and_sort`` is pure: it never touches
its inputs and always returns a new list (possibly empty).

Filtering is conjunctive over three predicates:

- status:   ``status_filter == "all"`` or the record's status equals it
- category: ``category_filter == "all"`` or the record's category equals it
- search:   empty term, or the lower-cased term is a substring of any search
            field; a field holding a list of strings matches on any element

Sorting only happens when every retained record has a ``str`` under the sort
field. Anything else keeps the filtered order.
"""
import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from expo_portal.core.choices import ALL, SortDirection
from expo_portal.core.errors import ValidationFailed


@dataclass(frozen=True)
class ListingCriteria:
    search_term: str = ""
    status_filter: str = ALL
    category_filter: str = ALL
    sort_field: Optional[str] = None
    sort_direction: str = SortDirection.ASC.value


@dataclass
class SortState:
    """Column-header sort toggle.

    Choosing the current field again flips the direction; choosing another
    field switches to it ascending.
    """

    field: str
    direction: str = SortDirection.ASC.value

    def toggle(self, field: str) -> "SortState":
        if field == self.field:
            self.direction = (
                SortDirection.DESC.value
                if self.direction == SortDirection.ASC.value
                else SortDirection.ASC.value
            )
        else:
            self.field = field
            self.direction = SortDirection.ASC.value
        return self

    def as_criteria(
        self,
        search_term: str = "",
        status_filter: str = ALL,
        category_filter: str = ALL,
    ) -> ListingCriteria:
        return ListingCriteria(
            search_term=search_term,
            status_filter=status_filter,
            category_filter=category_filter,
            sort_field=self.field,
            sort_direction=self.direction,
        )


def next_sort_directions(
    current_field: Optional[str],
    current_direction: str,
    fields: Iterable[str],
) -> dict[str, str]:
    """Direction each column would sort in if it were chosen next."""
    result = {}
    for field in fields:
        state = SortState(current_field or "", current_direction)
        result[field] = state.toggle(field).direction
    return result


def collation_key(text: str) -> tuple:
    """Sort key approximating the default browser collation.

    Accents and case are ignored first; punctuation, symbols and whitespace
    sort before digits and letters. Remaining ties go lowercase first, then by
    the raw text. Letters without a decomposition (such as "ø") still
    fall back to code-point order.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    primary = tuple((ch.isalnum(), ch) for ch in base)
    return (primary, text.swapcase(), text)


def field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def matches_search(record: Any, search_term: str, search_fields: Sequence[str]) -> bool:
    if search_term == "":
        return True

    needle = search_term.lower()
    for field in search_fields:
        value = field_value(record, field)
        if isinstance(value, str):
            if needle in value.lower():
                return True
        elif isinstance(value, (list, tuple)):
            if any(isinstance(item, str) and needle in item.lower() for item in value):
                return True
    return False


def _matches_choice(record: Any, field: str, choice: str) -> bool:
    return choice == ALL or field_value(record, field) == choice


def sort_records(records: list, sort_field: Optional[str], sort_direction: str) -> list:
    if not sort_field or not records:
        return list(records)

    if not all(isinstance(field_value(r, sort_field), str) for r in records):
        return list(records)

    return sorted(
        records,
        key=lambda r: collation_key(field_value(r, sort_field)),
        reverse=sort_direction == SortDirection.DESC.value,
    )


def filter_and_sort(
    records: Iterable[Any],
    criteria: ListingCriteria,
    *,
    search_fields: Sequence[str],
    category_field: str,
    status_field: str = "status",
) -> list:
    filtered = [
        r
        for r in records
        if _matches_choice(r, status_field, criteria.status_filter)
        and _matches_choice(r, category_field, criteria.category_filter)
        and matches_search(r, criteria.search_term, search_fields)
    ]
    return sort_records(filtered, criteria.sort_field, criteria.sort_direction)


def check_sort_field(sort_field: Optional[str], allowed: Sequence[str]) -> Optional[str]:
    if sort_field is not None and sort_field not in allowed:
        raise ValidationFailed(
            f"Cannot sort by {sort_field!r}; choose one of: {', '.join(allowed)}"
        )
    return sort_field
