"""Upload acceptance rules: media type and size."""

from casebrief.upload.exceptions import ValidationFailure
from casebrief.upload.models import UploadCandidate

MAX_UPLOAD_BYTES = 10 * 1024 * 1024

ALLOWED_MEDIA_TYPES = frozenset(
    {"application/pdf", "image/jpeg", "image/png", "image/webp"}
)


def validate_media_type(media_type: str) -> None:
    """Raise ValidationFailure unless the media type is accepted."""
    if media_type.lower() not in ALLOWED_MEDIA_TYPES:
        raise ValidationFailure(
            f"Unsupported file type '{media_type}'. Please upload PDF, JPG, PNG or WEBP."
        )


def validate_size(size_bytes: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Raise ValidationFailure if the size is zero or above the limit."""
    if size_bytes <= 0:
        raise ValidationFailure("File is empty.")
    if size_bytes > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise ValidationFailure(f"File is too large. Max {limit_mb}MB.")


def validate_upload(
    media_type: str,
    size_bytes: int,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> None:
    validate_media_type(media_type)
    validate_size(size_bytes, max_bytes)


def validate_candidate(
    candidate: UploadCandidate, max_bytes: int = MAX_UPLOAD_BYTES
) -> UploadCandidate:
    """Check an UploadCandidate against the acceptance rules and return it."""
    validate_upload(candidate.declared_media_type, candidate.size_bytes, max_bytes)
    return candidate
