"""Validates the parsed model response and builds an ExtractionResult.

Acceptance is all-or-nothing: the first violation rejects the whole response.
"""

import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from casebrief.extraction.exceptions import SchemaViolation
from casebrief.extraction.models import (
    CaseInfo,
    CustodyEntry,
    ExtractionResult,
    FinancialItem,
    RiskItem,
)
from casebrief.extraction.schema import REQUIRED_FIELDS

_MAX_ITEMS = 100
_FINANCIAL_TYPES = frozenset({"support", "asset"})
_SEVERITIES = frozenset({"high", "medium", "low"})

_T = TypeVar("_T")


def validate_and_build(
    data: dict[str, Any],
    required: Iterable[str] = REQUIRED_FIELDS,
) -> ExtractionResult:
    """Validate a parsed response and build an ExtractionResult.

    Args:
        data: The JSON object returned by the model.
        required: Field names that must be present, usually the schema's
            required list.

    Raises:
        SchemaViolation: on a missing required field or a wrong type.
    """
    _require_fields(data, required)
    return ExtractionResult(
        applicant_income=_number(data["applicantIncome"], "applicantIncome"),
        respondent_income=_number(data["respondentIncome"], "respondentIncome"),
        has_odsp=_boolean(data["hasODSP"], "hasODSP"),
        has_cpp=_boolean(data["hasCPP"], "hasCPP"),
        compliance_notes=_string_list(data["complianceNotes"], "complianceNotes"),
        child_support=_optional_number(data.get("childSupport"), "childSupport"),
        spousal_support=_optional_number(data.get("spousalSupport"), "spousalSupport"),
        case_info=_build_case_info(data.get("caseInfo")),
        custody=_build_items(data.get("custody"), "custody", _build_custody_entry),
        financials=_build_items(data.get("financials"), "financials", _build_financial_item),
        risks=_build_items(data.get("risks"), "risks", _build_risk_item),
    )


def _require_fields(data: dict[str, Any], required: Iterable[str]) -> None:
    for name in required:
        if name not in data or data[name] is None:
            raise SchemaViolation(f"Missing required field: {name}")


def _number(raw: Any, name: str) -> float:
    # bool is an int subclass; a flag is never an amount
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise SchemaViolation(f"'{name}' must be a number, got {type(raw).__name__}")
    try:
        value = float(raw)
    except OverflowError as exc:
        raise SchemaViolation(f"'{name}' is out of range") from exc
    if not math.isfinite(value):
        raise SchemaViolation(f"'{name}' must be a finite number, got {value}")
    return value


def _optional_number(raw: Any, name: str) -> float | None:
    if raw is None:
        return None
    return _number(raw, name)


def _boolean(raw: Any, name: str) -> bool:
    if not isinstance(raw, bool):
        raise SchemaViolation(f"'{name}' must be a boolean, got {type(raw).__name__}")
    return raw


def _string(raw: Any, name: str) -> str:
    if not isinstance(raw, str):
        raise SchemaViolation(f"'{name}' must be a string")
    return raw


def _optional_string(raw: Any, name: str) -> str:
    if raw is None:
        return ""
    return _string(raw, name)


def _integer(raw: Any, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise SchemaViolation(f"'{name}' must be an integer")
    return raw


def _string_list(raw: Any, name: str) -> list[str]:
    if not isinstance(raw, list):
        raise SchemaViolation(f"'{name}' must be a list")
    return [_string(item, f"{name}[{i}]") for i, item in enumerate(raw)]


def _build_case_info(raw: Any) -> CaseInfo | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise SchemaViolation("'caseInfo' must be an object or null")
    return CaseInfo(
        parties=_optional_string(raw.get("parties"), "caseInfo.parties"),
        jurisdiction=_optional_string(raw.get("jurisdiction"), "caseInfo.jurisdiction"),
        case_number=_optional_string(raw.get("caseNumber"), "caseInfo.caseNumber"),
        date=_optional_string(raw.get("date"), "caseInfo.date"),
    )


def _build_items(
    raw: Any, name: str, build: Callable[[dict[str, Any], str], _T]
) -> list[_T]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SchemaViolation(f"'{name}' must be a list")
    if len(raw) > _MAX_ITEMS:
        raise SchemaViolation(f"Too many {name} entries: {len(raw)} (max {_MAX_ITEMS})")
    items: list[_T] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise SchemaViolation(f"'{name}' entry at index {i} must be an object")
        items.append(build(item, f"{name}[{i}]"))
    return items


def _build_custody_entry(raw: dict[str, Any], path: str) -> CustodyEntry:
    return CustodyEntry(
        id=_integer(raw.get("id"), f"{path}.id"),
        label=_string(raw.get("label"), f"{path}.label"),
        value=_string(raw.get("value"), f"{path}.value"),
        detail=_optional_string(raw.get("detail"), f"{path}.detail"),
    )


def _build_financial_item(raw: dict[str, Any], path: str) -> FinancialItem:
    item_type = raw.get("type")
    if item_type not in _FINANCIAL_TYPES:
        raise SchemaViolation(
            f"'{path}.type' must be one of {sorted(_FINANCIAL_TYPES)}, got {item_type!r}"
        )
    return FinancialItem(
        id=_integer(raw.get("id"), f"{path}.id"),
        type=item_type,
        title=_string(raw.get("title"), f"{path}.title"),
        amount=_optional_string(raw.get("amount"), f"{path}.amount"),
        due=_optional_string(raw.get("due"), f"{path}.due"),
    )


def _build_risk_item(raw: dict[str, Any], path: str) -> RiskItem:
    severity = raw.get("severity")
    if severity not in _SEVERITIES:
        raise SchemaViolation(
            f"'{path}.severity' must be one of {sorted(_SEVERITIES)}, got {severity!r}"
        )
    return RiskItem(
        id=_integer(raw.get("id"), f"{path}.id"),
        severity=severity,
        title=_string(raw.get("title"), f"{path}.title"),
        description=_optional_string(raw.get("description"), f"{path}.description"),
    )
