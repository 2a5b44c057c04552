from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from casebrief.extraction.models import ExtractionResult
from casebrief.report.models import Report


class AnalysisStatus(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    COMPLETE = "complete"
    ERROR = "error"


@dataclass(frozen=True)
class AnalysisSession:
    """Snapshot of the analysis flow; the single source of truth for rendering.

    Only the status says whether an analysis is finished. Progress is
    advisory telemetry.
    """

    status: AnalysisStatus = AnalysisStatus.IDLE
    progress: int = 0
    result: ExtractionResult | None = None
    report: Report | None = None
    error_reason: str | None = None
    error_kind: str | None = None
    document_name: str | None = None
    analysis_id: str | None = None
    completed_at: datetime | None = None

    @property
    def is_analyzing(self) -> bool:
        return self.status is AnalysisStatus.ANALYZING

    @property
    def is_finished(self) -> bool:
        return self.status in (AnalysisStatus.COMPLETE, AnalysisStatus.ERROR)
