# /app/services/view_helpers/row_mapping.py

"""
Converts raw sheet rows into typed records.

A record model's fields, in declaration order, are the table's column schema.
Short rows and empty cells never fail: they take the field's declared default.
"""

from typing import Any, List, Optional, Sequence, Tuple, Type, TypeVar, get_origin

from ...models.record_model import SheetRecord

R = TypeVar("R", bound=SheetRecord)

# (field name, default, is a comma-joined list)
Column = Tuple[str, Any, bool]


def split_cell(cell: Optional[str]) -> List[str]:
    """Splits a comma-joined cell into trimmed parts; an empty cell gives []."""
    if not cell:
        return []
    return [part.strip() for part in cell.split(",")]


def schema_for(record_cls: Type[SheetRecord]) -> List[Column]:
    columns = []
    for name, info in record_cls.model_fields.items():
        is_list = get_origin(info.annotation) is list
        columns.append((name, info.get_default(call_default_factory=True), is_list))
    return columns


def map_row(row: Sequence[Optional[str]], record_cls: Type[R]) -> R:
    values = {}
    for index, (name, default, is_list) in enumerate(schema_for(record_cls)):
        cell = row[index] if index < len(row) else None
        if is_list:
            values[name] = split_cell(cell)
        elif cell is None or cell == "":
            values[name] = default
        else:
            values[name] = cell
    return record_cls(**values)


def map_rows(rows: Sequence[Sequence[Optional[str]]], record_cls: Type[R]) -> List[R]:
    """Maps every data row of a table; row 0 is the header and is skipped."""
    return [map_row(row, record_cls) for row in rows[1:]]
