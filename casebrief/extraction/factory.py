from typing import ClassVar

from casebrief.config.settings import Settings
from casebrief.extraction.analysis_client import AnalysisClient
from casebrief.extraction.base import BaseAnalysisClient
from casebrief.extraction.example_client_adapter import ExampleClientAdapter
from casebrief.extraction.openai_client_adapter import OpenAIClientAdapter


class AnalysisClientFactory:
    """Creates the configured analysis client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    DEFAULT_MODEL_NAMES: ClassVar[dict[str, str]] = {
        "gemini": "gemini-2.5-flash",
        "openai": "gpt-4o-mini",
    }

    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        """Create a configured analysis client from application settings."""
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return AnalysisClient(
                client=ExampleClientAdapter(delay_seconds=settings.example_delay_seconds),
                model="example",
                temperature=0.0,
            )
        client = OpenAIClientAdapter(
            api_key=settings.analysis_api_key,
            timeout_seconds=settings.analysis_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            require_api_key=provider not in cls.KEYLESS_PROVIDERS,
        )
        return AnalysisClient(
            client=client,
            model=cls._resolve_model_name(provider, settings),
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.analysis_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "analysis_base_url is required for analysis_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        model_name = settings.analysis_model_name.strip()
        if model_name:
            return model_name
        default = cls.DEFAULT_MODEL_NAMES.get(provider)
        if default is None:
            raise ValueError(
                f"analysis_model_name is required for analysis_provider={provider}"
            )
        return default
