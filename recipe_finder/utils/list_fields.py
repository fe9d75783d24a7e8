import re
from typing import Iterable, List, Union

ListFieldInput = Union[str, Iterable[str], None]


def split_list_field(value: ListFieldInput, separator: str = ",") -> List[str]:
    """Turn a stored list column into a clean list of strings.

    Accepts the comma-joined text the catalog table stores, or an
    already-split list. Items are trimmed and empty items dropped.
    """
    if not value:
        return []
    if isinstance(value, str):
        parts = value.split(separator)
    else:
        parts = [str(part) for part in value if part is not None]
    return [p.strip() for p in parts if p.strip()]


def split_lines(value: ListFieldInput) -> List[str]:
    """Split free text on line breaks, dropping blank lines."""
    if not value:
        return []
    if isinstance(value, str):
        parts = re.split(r'[\r\n]+', value)
        return [p.strip() for p in parts if p.strip()]
    return split_list_field(value)


def join_list_field(values: ListFieldInput, separator: str = ", ") -> str:
    """Store a list column the way the catalog table keeps it: comma-joined text."""
    return separator.join(split_list_field(values))
