from dataclasses import dataclass, field
from typing import Literal

FinancialType = Literal["support", "asset"]
Severity = Literal["high", "medium", "low"]


@dataclass(frozen=True)
class CaseInfo:
    """Case metadata printed on the document."""

    parties: str = ""
    jurisdiction: str = ""
    case_number: str = ""
    date: str = ""


@dataclass(frozen=True)
class CustodyEntry:
    """One line of the parenting time schedule."""

    id: int
    label: str
    value: str
    detail: str = ""


@dataclass(frozen=True)
class FinancialItem:
    """A support payment, asset transfer or deadline."""

    id: int
    type: FinancialType
    title: str
    amount: str = ""
    due: str = ""


@dataclass(frozen=True)
class RiskItem:
    """A drafting gap or enforcement risk with its severity."""

    id: int
    severity: Severity
    title: str
    description: str = ""


@dataclass(frozen=True)
class ExtractionResult:
    """Schema-validated output of one document analysis."""

    applicant_income: float
    respondent_income: float
    has_odsp: bool
    has_cpp: bool
    compliance_notes: list[str] = field(default_factory=list)
    child_support: float | None = None
    spousal_support: float | None = None
    case_info: CaseInfo | None = None
    custody: list[CustodyEntry] = field(default_factory=list)
    financials: list[FinancialItem] = field(default_factory=list)
    risks: list[RiskItem] = field(default_factory=list)
