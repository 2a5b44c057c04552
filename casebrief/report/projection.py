"""Builds the Report view model from a validated ExtractionResult."""

from casebrief.extraction.models import ExtractionResult, FinancialItem, RiskItem
from casebrief.report.models import Report, ReportSummary

_SEVERITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def project(result: ExtractionResult) -> Report:
    """Group an ExtractionResult into summary, custody, financials and risks.

    Pure function: no I/O and no failure modes for a validated result.
    """
    return Report(
        summary=ReportSummary(
            applicant_income=result.applicant_income,
            respondent_income=result.respondent_income,
            child_support=result.child_support,
            spousal_support=result.spousal_support,
            has_odsp=result.has_odsp,
            has_cpp=result.has_cpp,
            compliance_notes=tuple(result.compliance_notes),
        ),
        case=result.case_info,
        custody=tuple(result.custody),
        support_items=_support_items(result),
        obligations=tuple(item for item in result.financials if item.type == "asset"),
        risks=_ordered_risks(result.risks),
    )


def format_monthly(amount: float) -> str:
    """Format a monthly amount the way the dashboard shows it, e.g. '$1,250/mo'."""
    return f"${amount:,.0f}/mo"


def _support_items(result: ExtractionResult) -> tuple[FinancialItem, ...]:
    explicit = tuple(item for item in result.financials if item.type == "support")
    if explicit:
        return explicit
    # Plain extractions only carry the monthly amounts
    derived: list[FinancialItem] = []
    for title, amount in (
        ("Child Support", result.child_support),
        ("Spousal Support", result.spousal_support),
    ):
        if amount:
            derived.append(
                FinancialItem(
                    id=len(derived) + 1,
                    type="support",
                    title=title,
                    amount=format_monthly(amount),
                    due="Monthly",
                )
            )
    return tuple(derived)


def _ordered_risks(risks: list[RiskItem]) -> tuple[RiskItem, ...]:
    return tuple(sorted(risks, key=lambda risk: _SEVERITY_ORDER[risk.severity]))
