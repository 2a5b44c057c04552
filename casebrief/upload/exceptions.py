from casebrief.exceptions import AnalysisError


class ValidationFailure(AnalysisError):
    """Raised when an upload is rejected before it becomes a candidate."""

    default_message = "The uploaded file was rejected."


class EncodingFailure(AnalysisError):
    """Raised when document content cannot be read or encoded."""

    default_message = "The uploaded file could not be read."
