from abc import ABC, abstractmethod

from casebrief.extraction.models import ExtractionResult
from casebrief.extraction.schema import ExtractionSchema
from casebrief.upload.models import EncodedDocument


class BaseAnalysisClient(ABC):
    """Contract for document analysis clients."""

    @abstractmethod
    async def analyze(
        self,
        payload: EncodedDocument,
        schema: ExtractionSchema | None = None,
        *,
        jurisdiction: str | None = None,
    ) -> ExtractionResult:
        """Extract a structured record from an encoded document.

        Makes exactly one external call and never retries.

        Args:
            payload: The encoded document.
            schema: The extraction schema to enforce; the client default if None.
            jurisdiction: Optional jurisdiction context for the prompt.

        Returns:
            A fully validated ExtractionResult.

        Raises:
            AnalysisError: one of MissingCredential, TransportFailure,
                EmptyResponse, SchemaViolation, EncodingFailure.
        """
