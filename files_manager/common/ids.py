"""Record identifiers.

Ids are positive integers assigned by the document store. Values arriving
from requests or job payloads may be ints or strings; they are converted
once, here, before any lookup.
"""
from typing import Any, Optional

ROOT_ID = 0
# 数据库 INTEGER 上限
MAX_ID = 2 ** 63 - 1


def to_id(value: Any) -> Optional[int]:
    """Convert ``value`` to a record id, or ``None`` when it can't be one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= MAX_ID else None
    if isinstance(value, str):
        value = value.strip()
        if value.isdecimal() and len(value) <= len(str(MAX_ID)):
            return to_id(int(value))
    return None


def is_valid_id(value: Any) -> bool:
    """True when ``value`` references a record (the root id does not)."""
    converted = to_id(value)
    return converted is not None and converted != ROOT_ID


def is_root(value: Any) -> bool:
    if value is None or value == '':
        return True
    return to_id(value) == ROOT_ID
