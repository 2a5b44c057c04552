from casebrief.exceptions import AnalysisError


class MissingCredential(AnalysisError):
    """Raised when no API credential is configured. No network call is made."""

    default_message = (
        "API key is missing. Please check your environment configuration."
    )


class TransportFailure(AnalysisError):
    """Raised when the model call fails due to network/infrastructure issues."""

    default_message = "The analysis service could not be reached."


class EmptyResponse(AnalysisError):
    """Raised when the model call succeeds but returns no extractable text."""

    default_message = "No data returned from analysis."


class SchemaViolation(AnalysisError):
    """Raised when the model response fails extraction schema validation."""

    default_message = "The analysis response did not match the expected format."
