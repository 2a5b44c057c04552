"""AI-powered legal document analysis client."""

import json
from pathlib import Path
from string import Template

from casebrief.extraction.base import BaseAnalysisClient
from casebrief.extraction.client_base import BaseModelClient
from casebrief.extraction.exceptions import EmptyResponse, SchemaViolation
from casebrief.extraction.models import ExtractionResult
from casebrief.extraction.prompt_loader import load_prompt_template
from casebrief.extraction.schema import ExtractionSchema
from casebrief.extraction.validator import validate_and_build
from casebrief.logging.logger import Log
from casebrief.upload.exceptions import EncodingFailure
from casebrief.upload.models import EncodedDocument

DEFAULT_JURISDICTION = "Ontario"


class AnalysisClient(BaseAnalysisClient):
    """Extracts a validated record from a legal document using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        temperature: float = 0.0,
        schema: ExtractionSchema | None = None,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._schema = schema if schema is not None else ExtractionSchema.load()
        self._prompt_template = Template(load_prompt_template(prompt_template_path))

    @property
    def schema(self) -> ExtractionSchema:
        return self._schema

    async def analyze(
        self,
        payload: EncodedDocument,
        schema: ExtractionSchema | None = None,
        *,
        jurisdiction: str | None = None,
    ) -> ExtractionResult:
        """Run one extraction call and validate the response."""
        if not payload.data:
            raise EncodingFailure("Document payload is empty")
        schema = schema if schema is not None else self._schema

        prompt = self._build_prompt(schema, jurisdiction)
        debug = Log.is_debug_enabled()
        if debug:
            Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = await self._client.generate(
            model=self._model,
            temperature=self._temperature,
            prompt=prompt,
            document=payload,
            json_schema=schema.as_dict(),
        )
        if debug:
            Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed, schema.required)

        Log.info(
            f"Extraction complete for {payload.original_name}: "
            f"{len(result.compliance_notes)} compliance notes, {len(result.risks)} risks"
        )
        return result

    def _build_prompt(self, schema: ExtractionSchema, jurisdiction: str | None) -> str:
        # Literal braces and dollar amounts in the template are left as written
        return self._prompt_template.safe_substitute(
            jurisdiction=_display_jurisdiction(jurisdiction),
            json_schema=schema.to_json(),
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()

        if not cleaned:
            raise EmptyResponse("AI returned empty response")
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise SchemaViolation(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise SchemaViolation("JSON response must be an object")
        return parsed


def _display_jurisdiction(jurisdiction: str | None) -> str:
    if not jurisdiction or not jurisdiction.strip():
        return DEFAULT_JURISDICTION
    return jurisdiction.strip().replace("_", " ").replace("-", " ").title()
