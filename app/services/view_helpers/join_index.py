# /app/services/view_helpers/join_index.py

from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

R = TypeVar("R")


class JoinIndex(Generic[R]):
    """
    A per-request lookup over one table's records, keyed by a single field.

    The index is built in row order, so `find_one` returns the first matching
    record and `find_all` returns every match in the order the rows appear,
    exactly as a linear scan would. Keys compare by exact string equality.
    """

    def __init__(self, records: Iterable[R], key: Callable[[R], str]):
        self._groups: Dict[str, List[R]] = {}
        for record in records:
            self._groups.setdefault(key(record), []).append(record)

    def find_one(self, key_value: str) -> Optional[R]:
        matches = self._groups.get(key_value)
        return matches[0] if matches else None

    def find_all(self, key_value: str) -> List[R]:
        return list(self._groups.get(key_value, []))


def by_field(field_name: str) -> Callable[[object], str]:
    """Key accessor for a named record field."""
    return lambda record: getattr(record, field_name)
