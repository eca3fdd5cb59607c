import itertools
from collections import deque
from datetime import datetime
from typing import Optional

from ..models.verdict import HistoryEntry, Verdict


def _preview(text: str, length: int) -> str:
    return text[:length] + "..."


def _format_time(moment: datetime) -> str:
    return moment.strftime("%I:%M:%S %p").lstrip("0")


class SessionHistory:
    """Most-recent-first log of past scans, bounded to ``capacity`` entries.

    Recording past capacity evicts the oldest entry. Identical texts are
    recorded as separate entries.
    """

    def __init__(self, capacity: int = 5, title_chars: int = 30):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self.capacity = capacity
        self.title_chars = title_chars
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[HistoryEntry]:
        return list(self._entries)

    def record(self, entry: HistoryEntry) -> None:
        self._entries.appendleft(entry)

    def make_entry(self, job_text: str, verdict: Verdict, now: Optional[datetime] = None) -> HistoryEntry:
        return HistoryEntry(
            id=next(self._ids),
            title=_preview(job_text, self.title_chars),
            status=verdict.status,
            timestamp=_format_time(now or datetime.now()),
        )

    def record_verdict(self, job_text: str, verdict: Verdict) -> HistoryEntry:
        entry = self.make_entry(job_text, verdict)
        self.record(entry)
        return entry
