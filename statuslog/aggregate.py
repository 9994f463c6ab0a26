"""statuslog - Status code aggregation"""

from collections import Counter
from typing import Iterable, List, Optional

from .models import LogEntry, StatusCodeCount


def count_by_status(entries: Iterable[LogEntry]) -> List[StatusCodeCount]:
    """Count entries per status code, least frequent first.

    Equal counts are ordered by status code.
    """
    counts = Counter(entry.status_code for entry in entries)
    ranked = sorted(counts.items(), key=lambda item: (item[1], item[0]))
    return [StatusCodeCount(code=code, count=count) for code, count in ranked]


def most_common_status(counts: List[StatusCodeCount]) -> Optional[StatusCodeCount]:
    # ranking is ascending, so the most frequent code is last
    return counts[-1] if counts else None
