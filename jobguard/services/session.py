from dataclasses import dataclass, field
from typing import Optional

from ..config import Settings
from ..models.verdict import Verdict
from .history import SessionHistory


@dataclass
class ScanSession:
    """Everything one user sees: the input box, the last result and the scan log.

    Owned by the caller and passed to the pipeline by reference. History is
    only ever touched by a successful analysis; ``reset`` leaves it alone.
    """

    history: SessionHistory = field(default_factory=SessionHistory)
    job_text: str = ""
    result: Optional[Verdict] = None
    error: Optional[str] = None
    in_progress: bool = False

    @classmethod
    def from_settings(cls, cfg: Settings) -> "ScanSession":
        return cls(history=SessionHistory(cfg.history_capacity, cfg.title_preview_chars))

    @property
    def can_submit(self) -> bool:
        return not self.in_progress and bool(self.job_text)

    def reset(self) -> None:
        self.job_text = ""
        self.result = None
        self.error = None
