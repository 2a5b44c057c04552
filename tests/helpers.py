"""Shared builders and test doubles."""

import asyncio
from typing import Any

from casebrief.extraction.base import BaseAnalysisClient
from casebrief.extraction.models import ExtractionResult
from casebrief.extraction.schema import ExtractionSchema
from casebrief.upload.models import EncodedDocument, UploadCandidate


def make_candidate(
    raw_bytes: bytes = b"%PDF-1.4 test content",
    media_type: str = "application/pdf",
    name: str = "order.pdf",
) -> UploadCandidate:
    return UploadCandidate(
        raw_bytes=raw_bytes,
        declared_media_type=media_type,
        size_bytes=len(raw_bytes),
        original_name=name,
    )


def valid_response(**overrides: Any) -> dict[str, Any]:
    """Minimal model response that satisfies the required fields."""
    data: dict[str, Any] = {
        "applicantIncome": 120000,
        "respondentIncome": 85000,
        "hasODSP": False,
        "hasCPP": False,
        "complianceNotes": ["note A"],
    }
    data.update(overrides)
    return data


def make_result(applicant_income: float = 120000.0, **kwargs: Any) -> ExtractionResult:
    return ExtractionResult(
        applicant_income=applicant_income,
        respondent_income=kwargs.pop("respondent_income", 85000.0),
        has_odsp=kwargs.pop("has_odsp", False),
        has_cpp=kwargs.pop("has_cpp", False),
        compliance_notes=kwargs.pop("compliance_notes", ["note A"]),
        **kwargs,
    )


class ScriptedCall:
    """One scripted analyze() call: waits for its gate, then returns or raises."""

    def __init__(
        self,
        outcome: ExtractionResult | BaseException,
        swallow_cancel: bool = False,
    ) -> None:
        self.gate = asyncio.Event()
        self.outcome = outcome
        self.swallow_cancel = swallow_cancel
        self.started = False
        self.cancelled = False


class ScriptedAnalysisClient(BaseAnalysisClient):
    """Analysis client double driven by a queue of ScriptedCall objects."""

    def __init__(self, *calls: ScriptedCall) -> None:
        self._calls = list(calls)
        self.payloads: list[EncodedDocument] = []
        self.jurisdictions: list[str | None] = []

    @property
    def call_count(self) -> int:
        return len(self.payloads)

    async def analyze(
        self,
        payload: EncodedDocument,
        schema: ExtractionSchema | None = None,
        *,
        jurisdiction: str | None = None,
    ) -> ExtractionResult:
        call = self._calls.pop(0)
        self.payloads.append(payload)
        self.jurisdictions.append(jurisdiction)
        call.started = True
        try:
            await call.gate.wait()
        except asyncio.CancelledError:
            call.cancelled = True
            if not call.swallow_cancel:
                raise
        if isinstance(call.outcome, BaseException):
            raise call.outcome
        return call.outcome
