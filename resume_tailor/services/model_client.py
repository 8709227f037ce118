"""Model client: one place that talks to the hosted LLM, swappable for a test double."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from openai import AsyncOpenAI
from pydantic import BaseModel, Field

from resume_tailor.config import (
    MODEL_NAME,
    OPENAI_API_KEY,
    OPENAI_MAX_RETRIES,
    OPENAI_TIMEOUT_SECONDS,
)
from resume_tailor.exceptions import ConfigurationError
from resume_tailor.utils.logger import get_logger

logger = get_logger(__name__)


class ModelRequest(BaseModel):
    """A single prompt for the model, either schema-constrained or free text."""

    prompt: str = Field(..., description="Full instruction prompt, input text embedded")
    temperature: Optional[float] = Field(default=None, description="Sampling temperature; None uses the provider default")
    response_schema: Optional[dict[str, Any]] = Field(
        default=None, description="JSON schema the response must follow (structured extraction)"
    )
    schema_name: str = Field(default="response", description="Name reported to the provider for the schema")

    @property
    def is_structured(self) -> bool:
        return self.response_schema is not None


class ModelClient(ABC):
    """Abstract model provider."""

    @abstractmethod
    async def complete(self, request: ModelRequest) -> Optional[str]:
        """Submit one request. Returns the response text (may be None or empty); raises on transport errors."""
        ...


class OpenAIModelClient(ModelClient):
    """OpenAI chat completions (e.g. gpt-4o-mini) with JSON-schema constrained output for extraction."""

    def __init__(
        self,
        api_key: str = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        max_retries: int = OPENAI_MAX_RETRIES,
        timeout: Optional[float] = OPENAI_TIMEOUT_SECONDS,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        self._model = model
        if client is not None:
            self._client = client
            return
        if not api_key:
            raise ConfigurationError("OPENAI_API_KEY is not set. Add it to your .env file.")
        kwargs: dict[str, Any] = {"api_key": api_key, "max_retries": max_retries}
        if timeout is not None:
            kwargs["timeout"] = timeout
        self._client = AsyncOpenAI(**kwargs)

    @property
    def model(self) -> str:
        return self._model

    def _build_params(self, request: ModelRequest) -> dict[str, Any]:
        params: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": "user", "content": request.prompt}],
        }
        if request.temperature is not None:
            params["temperature"] = request.temperature
        if request.is_structured:
            params["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": request.schema_name,
                    "schema": request.response_schema,
                    "strict": False,
                },
            }
        return params

    async def complete(self, request: ModelRequest) -> Optional[str]:
        response = await self._client.chat.completions.create(**self._build_params(request))
        choice = response.choices[0] if response.choices else None
        if not choice or not choice.message:
            return None
        if response.usage is not None:
            logger.info(
                "Model call finished: model=%s structured=%s prompt_tokens=%s completion_tokens=%s",
                self._model,
                request.is_structured,
                response.usage.prompt_tokens,
                response.usage.completion_tokens,
            )
        return choice.message.content


def get_model_client() -> ModelClient:
    """Return the configured production model client. Raises ConfigurationError without an API key."""
    return OpenAIModelClient()
