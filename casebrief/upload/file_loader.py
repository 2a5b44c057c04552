import mimetypes
from pathlib import Path

from casebrief.upload.exceptions import EncodingFailure, ValidationFailure
from casebrief.upload.models import UploadCandidate
from casebrief.upload.validation import MAX_UPLOAD_BYTES, validate_upload

mimetypes.add_type("image/webp", ".webp")


def guess_media_type(path: Path) -> str:
    """Guess the media type from the file name, '' if unknown."""
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or ""


class FileLoader:
    """Reads a document from disk into an UploadCandidate."""

    def __init__(self, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
        self._max_bytes = max_bytes

    def load(self, path: Path, media_type: str | None = None) -> UploadCandidate:
        """Validate and read a document file.

        Type and size are checked before the content is read.

        Raises:
            ValidationFailure: if the file is missing, of an unsupported
                type, empty, or too large.
            EncodingFailure: if the file cannot be read.
        """
        if not path.is_file():
            raise ValidationFailure(f"File not found: {path}")
        declared = media_type or guess_media_type(path)
        try:
            size = path.stat().st_size
        except OSError as exc:
            raise EncodingFailure(f"Cannot read '{path.name}': {exc}") from exc
        validate_upload(declared, size, self._max_bytes)
        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise EncodingFailure(f"Cannot read '{path.name}': {exc}") from exc
        return UploadCandidate(
            raw_bytes=raw_bytes,
            declared_media_type=declared.lower(),
            size_bytes=len(raw_bytes),
            original_name=path.name,
        )
