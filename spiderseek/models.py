# spiderseek/models.py
"""
Data models for a single injection run.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


class InjectionStatus(str, Enum):
    """Terminal state of one collected file."""

    INJECTED = "injected"
    EXCLUDED = "excluded"
    ALREADY_TAGGED = "already_tagged"
    FAILED = "failed"


@dataclass(slots=True)
class FileRecord:
    """Absolute path of a built page and the URL path it is served at."""

    path: Path
    url_path: str


@dataclass(slots=True)
class FileOutcome:
    record: FileRecord
    status: InjectionStatus
    matched_by: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "path": str(self.record.path),
            "url_path": self.record.url_path,
            "status": self.status.value,
        }
        if self.matched_by is not None:
            data["matched_by"] = self.matched_by
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(slots=True)
class InjectionResult:
    """Aggregate of a run: modified-file count, configured exclusions and per-file outcomes."""

    exclusions: List[str] = field(default_factory=list)
    outcomes: List[FileOutcome] = field(default_factory=list)
    modified: int = 0

    def add(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status is InjectionStatus.INJECTED:
            self.modified += 1

    def _count(self, status: InjectionStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def excluded(self) -> int:
        return self._count(InjectionStatus.EXCLUDED)

    @property
    def already_tagged(self) -> int:
        return self._count(InjectionStatus.ALREADY_TAGGED)

    @property
    def failed(self) -> int:
        return self._count(InjectionStatus.FAILED)

    @property
    def failures(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if o.status is InjectionStatus.FAILED]

    def summary(self) -> str:
        """Human-readable one-line report."""
        text = f"Injected <script> into {self.modified} page(s)."
        if self.exclusions:
            text += f" Excluded: {', '.join(self.exclusions)}"
        if self.failed:
            text += f" Failed: {self.failed} file(s)."
        return text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modified": self.modified,
            "excluded": self.excluded,
            "already_tagged": self.already_tagged,
            "failed": self.failed,
            "exclusions": list(self.exclusions),
            "files": [o.to_dict() for o in self.outcomes],
        }

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
