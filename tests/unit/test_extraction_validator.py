"""Tests for extraction response validation."""

from typing import Any

import pytest

from casebrief.extraction.exceptions import SchemaViolation
from casebrief.extraction.example_client_adapter import ExampleClientAdapter
from casebrief.extraction.models import CaseInfo, ExtractionResult
from casebrief.extraction.validator import validate_and_build
from helpers import valid_response


class TestValidPayloads:
    def test_required_fields_only(self) -> None:
        result = validate_and_build(valid_response())
        assert isinstance(result, ExtractionResult)
        assert result.applicant_income == 120000.0
        assert result.respondent_income == 85000.0
        assert result.has_odsp is False
        assert result.has_cpp is False
        assert result.compliance_notes == ["note A"]
        assert result.child_support is None
        assert result.spousal_support is None
        assert result.case_info is None
        assert result.custody == []
        assert result.financials == []
        assert result.risks == []

    def test_integer_income_converted_to_float(self) -> None:
        result = validate_and_build(valid_response(applicantIncome=50000))
        assert isinstance(result.applicant_income, float)

    def test_empty_compliance_notes(self) -> None:
        result = validate_and_build(valid_response(complianceNotes=[]))
        assert result.compliance_notes == []

    def test_compliance_notes_keep_order(self) -> None:
        result = validate_and_build(valid_response(complianceNotes=["b", "a", "c"]))
        assert result.compliance_notes == ["b", "a", "c"]

    def test_support_amounts(self) -> None:
        result = validate_and_build(valid_response(childSupport=1250, spousalSupport=800.5))
        assert result.child_support == 1250.0
        assert result.spousal_support == 800.5

    def test_null_optional_fields(self) -> None:
        result = validate_and_build(
            valid_response(childSupport=None, caseInfo=None, custody=None, risks=None)
        )
        assert result.child_support is None
        assert result.case_info is None
        assert result.custody == []
        assert result.risks == []

    def test_case_info(self) -> None:
        result = validate_and_build(
            valid_response(caseInfo={"parties": "Smith vs. Smith", "caseNumber": "19D004821"})
        )
        assert result.case_info == CaseInfo(parties="Smith vs. Smith", case_number="19D004821")

    def test_full_example_payload(self) -> None:
        result = validate_and_build(dict(ExampleClientAdapter.DEFAULT_RESPONSE))
        assert len(result.custody) == 3
        assert [f.type for f in result.financials] == ["support", "support", "asset"]
        assert [r.severity for r in result.risks] == ["high", "medium", "low"]

    def test_extra_fields_ignored(self) -> None:
        result = validate_and_build(valid_response(confidence=0.9))
        assert result.applicant_income == 120000.0


class TestMissingRequiredFields:
    @pytest.mark.parametrize(
        "name",
        ["applicantIncome", "respondentIncome", "hasODSP", "hasCPP", "complianceNotes"],
    )
    def test_missing_field(self, name: str) -> None:
        data = valid_response()
        del data[name]
        with pytest.raises(SchemaViolation, match=name):
            validate_and_build(data)

    def test_null_required_field(self) -> None:
        with pytest.raises(SchemaViolation, match="hasCPP"):
            validate_and_build(valid_response(hasCPP=None))

    def test_custom_required_list(self) -> None:
        data = valid_response()
        with pytest.raises(SchemaViolation, match="childSupport"):
            validate_and_build(data, required=["childSupport"])


class TestWrongTypes:
    @pytest.mark.parametrize("value", ["120000", True, [1]])
    def test_income_must_be_number(self, value: Any) -> None:
        with pytest.raises(SchemaViolation, match="applicantIncome"):
            validate_and_build(valid_response(applicantIncome=value))

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_income_must_be_finite(self, value: float) -> None:
        with pytest.raises(SchemaViolation, match="finite"):
            validate_and_build(valid_response(applicantIncome=value))

    def test_support_must_be_finite(self) -> None:
        with pytest.raises(SchemaViolation, match="childSupport"):
            validate_and_build(valid_response(childSupport=float("nan")))

    def test_income_out_of_float_range(self) -> None:
        with pytest.raises(SchemaViolation, match="out of range"):
            validate_and_build(valid_response(respondentIncome=10**400))

    @pytest.mark.parametrize("value", ["false", 0, None])
    def test_flag_must_be_boolean(self, value: Any) -> None:
        with pytest.raises(SchemaViolation, match="hasODSP"):
            validate_and_build(valid_response(hasODSP=value))

    def test_notes_must_be_list(self) -> None:
        with pytest.raises(SchemaViolation, match="complianceNotes"):
            validate_and_build(valid_response(complianceNotes="note A"))

    def test_notes_must_be_strings(self) -> None:
        with pytest.raises(SchemaViolation, match=r"complianceNotes\[1\]"):
            validate_and_build(valid_response(complianceNotes=["ok", 3]))

    def test_optional_support_type_checked(self) -> None:
        with pytest.raises(SchemaViolation, match="childSupport"):
            validate_and_build(valid_response(childSupport="$1,250"))

    def test_case_info_must_be_object(self) -> None:
        with pytest.raises(SchemaViolation, match="caseInfo"):
            validate_and_build(valid_response(caseInfo="Smith vs. Smith"))


class TestItemValidation:
    def test_custody_entry_not_object(self) -> None:
        with pytest.raises(SchemaViolation, match=r"custody' entry at index 0"):
            validate_and_build(valid_response(custody=["2-2-5-5"]))

    def test_custody_entry_missing_label(self) -> None:
        with pytest.raises(SchemaViolation, match=r"custody\[0\]\.label"):
            validate_and_build(valid_response(custody=[{"id": 1, "value": "x"}]))

    def test_financial_type_enum(self) -> None:
        item = {"id": 1, "type": "loan", "title": "Car"}
        with pytest.raises(SchemaViolation, match=r"financials\[0\]\.type"):
            validate_and_build(valid_response(financials=[item]))

    def test_risk_severity_enum(self) -> None:
        item = {"id": 1, "severity": "critical", "title": "Gap"}
        with pytest.raises(SchemaViolation, match=r"risks\[0\]\.severity"):
            validate_and_build(valid_response(risks=[item]))

    def test_item_id_must_be_integer(self) -> None:
        item = {"id": "1", "severity": "low", "title": "Gap"}
        with pytest.raises(SchemaViolation, match=r"risks\[0\]\.id"):
            validate_and_build(valid_response(risks=[item]))

    def test_too_many_items(self) -> None:
        risks = [{"id": i, "severity": "low", "title": f"R{i}"} for i in range(101)]
        with pytest.raises(SchemaViolation, match="Too many risks"):
            validate_and_build(valid_response(risks=risks))

    def test_one_bad_item_rejects_whole_result(self) -> None:
        risks = [
            {"id": 1, "severity": "high", "title": "Good"},
            {"id": 2, "severity": "high"},
        ]
        with pytest.raises(SchemaViolation):
            validate_and_build(valid_response(risks=risks))
