from pathlib import Path

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled extraction_prompt.txt.

    Returns:
        The raw template string with $jurisdiction and $json_schema placeholders.

    Raises:
        OSError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_prompt.txt"
    return path.read_text(encoding="utf-8")


def load_json_schema(path: Path | None = None) -> str:
    """Load the extraction JSON schema from a file.

    Defaults to the bundled extraction_schema.json.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "extraction_schema.json"
    return path.read_text(encoding="utf-8")
