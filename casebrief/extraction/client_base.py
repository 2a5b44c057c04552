from abc import ABC, abstractmethod

from casebrief.upload.models import EncodedDocument


class BaseModelClient(ABC):
    """Contract for provider-specific generative model clients."""

    @abstractmethod
    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        """Send one request with the inline document and return the response text.

        Raises:
            MissingCredential: if the provider needs a key and none is set.
            TransportFailure: on network or API errors.
            EmptyResponse: if the provider returned no text.
        """
