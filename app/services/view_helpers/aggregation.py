# /app/services/view_helpers/aggregation.py

"""
Counting and percentage helpers shared by the view services.

Two kinds of categorical counts are supported and must not be confused:

- fixed-set counts report exactly the enumerated labels, in the given order.
  Records whose value is not one of the labels are left out of every bucket.
- dynamic-set counts report exactly the distinct values present, in order of
  first occurrence (case-sensitive).
"""

import math
import re
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, TypeVar

import pandas as pd

from .join_index import JoinIndex

R = TypeVar("R")
S = TypeVar("S")

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _values(records: Iterable[R], accessor: Callable[[R], object]) -> pd.Series:
    return pd.Series([accessor(r) for r in records], dtype=object)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentage(numerator: float, denominator: float, default: Optional[int]) -> Optional[int]:
    """`round(100 * numerator / denominator)`, or `default` when the denominator is 0."""
    if denominator > 0:
        return round_half_up(100 * numerator / denominator)
    return default


def parse_int(cell: Optional[str]) -> int:
    """Leading integer of a cell ("12h" -> 12); 0 when there is none."""
    match = _INT_PREFIX.match(cell or "")
    return int(match.group(1)) if match else 0


def parse_float(cell: Optional[str]) -> float:
    """Leading decimal number of a cell ("87.5%" -> 87.5); 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(cell or "")
    if not match:
        return 0.0
    value = float(match.group(1))
    # "1e400" overflows to inf, which cannot be rounded to an int.
    return value if math.isfinite(value) else 0.0


def count_matching(records: Iterable[R], predicate: Callable[[R], bool]) -> int:
    return sum(1 for r in records if predicate(r))


def count_fixed(
    records: Sequence[R],
    accessor: Callable[[R], str],
    labels: Sequence[str],
    label_key: str = "name",
) -> List[Dict[str, object]]:
    values = _values(records, accessor)
    return [{label_key: label, "count": int(values.eq(label).sum())} for label in labels]


def distinct_values(records: Sequence[R], accessor: Callable[[R], str]) -> List[str]:
    return list(pd.unique(_values(records, accessor)))


def count_dynamic(
    records: Sequence[R],
    accessor: Callable[[R], str],
    label_key: str = "name",
) -> List[Dict[str, object]]:
    values = _values(records, accessor)
    counts = values.value_counts(dropna=False)
    return [{label_key: label, "count": int(counts.loc[label])} for label in pd.unique(values)]


def sum_by_group(
    records: Sequence[R],
    group_of: Callable[[R], str],
    **value_of: Callable[[R], int],
) -> List[Tuple[str, Dict[str, int]]]:
    """
    Integer sums of several per-record values, grouped by a dynamic key.
    Groups come back in order of first occurrence.
    """
    if not records:
        return []
    frame = pd.DataFrame(
        {"group": [group_of(r) for r in records], **{name: [fn(r) for r in records] for name, fn in value_of.items()}}
    )
    sums = frame.groupby("group", sort=False).sum()
    return [(group, {name: int(row[name]) for name in value_of}) for group, row in sums.iterrows()]


def cross_table_breakdown(
    records: Sequence[R],
    labels: Sequence[str],
    category_of: Callable[[R], str],
    member_counts: Dict[str, Callable[[R], bool]],
    index: JoinIndex,
    key_of: Callable[[R], str],
    joined_counts: Dict[str, Callable[[S], bool]],
) -> List[Dict[str, object]]:
    """
    Per-category breakdown that joins into a second table.

    For each fixed label the primary records are filtered to that category;
    `member_counts` predicates are counted on the members directly, and
    `joined_counts` predicates are counted on each member's first match in
    `index` (members without a match count for nothing).
    """
    breakdown = []
    for label in labels:
        members = [r for r in records if category_of(r) == label]
        joined = [index.find_one(key_of(m)) for m in members]
        joined = [j for j in joined if j is not None]

        entry: Dict[str, object] = {"name": label, "total": len(members)}
        for name, predicate in member_counts.items():
            entry[name] = count_matching(members, predicate)
        for name, predicate in joined_counts.items():
            entry[name] = count_matching(joined, predicate)
        breakdown.append(entry)
    return breakdown
