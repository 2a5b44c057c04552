import json
from pathlib import Path
from typing import Any

from casebrief.extraction.prompt_loader import load_json_schema

REQUIRED_FIELDS = (
    "applicantIncome",
    "respondentIncome",
    "hasODSP",
    "hasCPP",
    "complianceNotes",
)


class ExtractionSchema:
    """The JSON schema the model response must satisfy.

    Wraps a JSON Schema object and checks it is well-formed: an object type
    with a properties mapping and a required list drawn from it.
    """

    def __init__(self, schema: dict[str, Any]) -> None:
        self._check_well_formed(schema)
        self._schema = schema

    @classmethod
    def load(cls, path: Path | None = None) -> "ExtractionSchema":
        """Load the bundled schema, or a custom one from path."""
        return cls(json.loads(load_json_schema(path)))

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self._schema["properties"])

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(self._schema.get("required", ()))

    def as_dict(self) -> dict[str, Any]:
        return json.loads(json.dumps(self._schema))

    def to_json(self) -> str:
        return json.dumps(self._schema, indent=2)

    @staticmethod
    def _check_well_formed(schema: Any) -> None:
        if not isinstance(schema, dict):
            raise ValueError("Extraction schema must be a JSON object")
        if schema.get("type") != "object":
            raise ValueError("Extraction schema must describe an object")
        properties = schema.get("properties")
        if not isinstance(properties, dict) or not properties:
            raise ValueError("Extraction schema must define properties")
        required = schema.get("required", [])
        if not isinstance(required, list):
            raise ValueError("Extraction schema 'required' must be a list")
        missing = [name for name in required if name not in properties]
        if missing:
            raise ValueError(f"Required fields not in properties: {missing}")
        undeclared = [name for name in REQUIRED_FIELDS if name not in required]
        if undeclared:
            raise ValueError(f"Extraction schema must require: {undeclared}")
