from __future__ import annotations
from collections import Counter
from typing import Iterable, List, Mapping, Tuple

from constants import UNKNOWN_LABEL


def group_label(row: Mapping[str, object], key: str) -> str:
    value = row.get(key)
    label = str(value).strip() if value is not None else ""
    return label or UNKNOWN_LABEL


def group_count(rows: Iterable[Mapping[str, object]], key: str) -> List[Tuple[str, int]]:
    """
    Count rows per value of `key`, highest count first.
    Missing/blank values are grouped under "Unknown"; ties keep first-seen order.
    """
    counts = Counter(group_label(r, key) for r in rows)
    # most_common() is a stable sort on count, so insertion order breaks ties
    return counts.most_common()
