from dataclasses import dataclass

from casebrief.extraction.models import (
    CaseInfo,
    CustodyEntry,
    FinancialItem,
    RiskItem,
    Severity,
)


@dataclass(frozen=True)
class ReportSummary:
    """Headline figures and flags of the analysis."""

    applicant_income: float
    respondent_income: float
    child_support: float | None
    spousal_support: float | None
    has_odsp: bool
    has_cpp: bool
    compliance_notes: tuple[str, ...] = ()

    @property
    def benefit_adjustment(self) -> bool:
        """True when ODSP or CPP-Disability may change income inclusions."""
        return self.has_odsp or self.has_cpp


@dataclass(frozen=True)
class Report:
    """Read-only view model built from one ExtractionResult."""

    summary: ReportSummary
    case: CaseInfo | None = None
    custody: tuple[CustodyEntry, ...] = ()
    support_items: tuple[FinancialItem, ...] = ()
    obligations: tuple[FinancialItem, ...] = ()
    risks: tuple[RiskItem, ...] = ()

    def risks_with(self, severity: Severity) -> tuple[RiskItem, ...]:
        return tuple(risk for risk in self.risks if risk.severity == severity)
