"""Tests for prompt template and JSON schema loading."""

from pathlib import Path
from string import Template

import pytest

from casebrief.extraction.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "$jurisdiction" in template
        assert "$json_schema" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Analyze for $jurisdiction")
        assert load_prompt_template(custom) == "Analyze for $jurisdiction"

    def test_default_template_formats_with_schema(self) -> None:
        prompt = Template(load_prompt_template()).substitute(
            jurisdiction="Ontario", json_schema=load_json_schema()
        )
        assert prompt.startswith("You are an expert legal assistant for Ontario Family Law")
        assert '"hasODSP"' in prompt

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(OSError):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_loads_default_schema(self) -> None:
        schema = load_json_schema()
        assert "applicantIncome" in schema
        assert "complianceNotes" in schema

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(OSError):
            load_json_schema(Path("/nonexistent/schema.json"))
