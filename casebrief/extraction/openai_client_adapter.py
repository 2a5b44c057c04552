import httpx
import openai

from casebrief.extraction.client_base import BaseModelClient
from casebrief.extraction.exceptions import (
    EmptyResponse,
    MissingCredential,
    TransportFailure,
)
from casebrief.upload.models import EncodedDocument


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        require_api_key: bool = True,
    ) -> None:
        self._api_key = api_key
        self._require_api_key = require_api_key
        self._client = openai.AsyncOpenAI(
            api_key=api_key or "not-needed",
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        document: EncodedDocument,
        json_schema: dict[str, object],
    ) -> str:
        if self._require_api_key and not self._api_key:
            raise MissingCredential()
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "extraction_result",
                        "strict": False,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._document_part(document),
                            {"type": "text", "text": prompt},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TransportFailure(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise TransportFailure(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EmptyResponse("AI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise EmptyResponse("AI returned empty response")
        return content

    @staticmethod
    def _document_part(document: EncodedDocument) -> dict[str, object]:
        if document.is_image:
            return {"type": "image_url", "image_url": {"url": document.as_data_url()}}
        return {
            "type": "file",
            "file": {
                "filename": document.original_name,
                "file_data": document.as_data_url(),
            },
        }
