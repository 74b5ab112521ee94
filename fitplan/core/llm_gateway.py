"""LLM gateway for plan generation completions.

Updates:
    v0.1.0 - 2026-10-19 - Single-shot LiteLLM dispatch with text-part extraction.
"""

from __future__ import annotations

import logging
from os import environ
from typing import Any, Callable, Dict, List, Mapping, Sequence, TYPE_CHECKING, cast

import litellm
from litellm import completion as _litellm_completion  # pyright: ignore[reportUnknownVariableType]

from ..services.config_service import ConfigService, WorkflowModelConfig
from .errors import GenerationFailed

litellm.drop_params = True

if TYPE_CHECKING:
    from typing import Protocol

    class CompletionCallable(Protocol):
        def __call__(
            self,
            *,
            messages: List[Dict[str, str]],
            **kwargs: Any,
        ) -> Dict[str, Any]:
            ...
else:
    CompletionCallable = Callable[..., Any]

completion = _litellm_completion

logger = logging.getLogger(__name__)


class LLMGateway:
    """Central point for dispatching LLM calls.

    Every call is made exactly once: failures surface immediately as
    `GenerationFailed` and the caller decides whether to resubmit.
    """

    DEFAULT_TIMEOUT_SECONDS = 60
    DEFAULT_MAX_TOKENS = 4000

    def __init__(self, config_service: ConfigService) -> None:
        """Store configuration dependencies for LLM dispatch.

        Args:
            config_service (ConfigService): Loader providing workflow model configuration.
        """

        self._config_service = config_service

    def invoke(
        self,
        workflow: str,
        prompt: str,
        **kwargs: Any,
    ) -> str:
        """Invoke the configured LLM workflow and return the response text.

        Args:
            workflow (str): Name of the workflow whose model settings apply.
            prompt (str): User-role message content.
            **kwargs: Provider-specific overrides for the request.

        Returns:
            str: First text-typed content part of the response, verbatim.

        Raises:
            GenerationFailed: If the call errors, times out, or returns no text.
        """

        config = self._config_service.get_workflow_model_config(workflow)
        messages = [{"role": "user", "content": prompt}]
        params = self._build_params(config, kwargs)

        logger.debug(
            "Invoking workflow=%s model=%s max_tokens=%s",
            workflow,
            params.get("model"),
            params.get("max_tokens"),
        )
        completion_fn = cast(CompletionCallable, completion)
        try:
            raw_response = completion_fn(messages=messages, **params)
        except Exception as exc:
            message = f"LLM invocation failed for workflow '{workflow}': {exc}"
            logger.error(message)
            raise GenerationFailed(message) from exc

        response = self._normalise_response(raw_response)
        return self._extract_text_content(response)

    def _build_params(
        self, config: WorkflowModelConfig, overrides: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Build the request parameters merged with overrides and provider settings.

        Raises:
            GenerationFailed: If a configured provider is missing its API key.
        """

        params: Dict[str, Any] = {
            "model": config.model,
            "max_tokens": config.max_tokens or self.DEFAULT_MAX_TOKENS,
            "timeout": config.timeout or self.DEFAULT_TIMEOUT_SECONDS,
        }
        if config.temperature is not None:
            params["temperature"] = config.temperature

        provider_name = config.provider
        if provider_name:
            provider_config = dict(self._config_service.providers.get(provider_name, {}))
            api_key_env = provider_config.pop("api_key_env", None)
            litellm_provider = provider_config.pop("litellm_provider", None)
            params.update(provider_config)
            if api_key_env:
                api_key = environ.get(api_key_env)
                if not api_key:
                    message = f"Environment variable '{api_key_env}' required for provider '{provider_name}'."
                    logger.error(message)
                    raise GenerationFailed(message)
                params.setdefault("api_key", api_key)
            params.setdefault("custom_llm_provider", litellm_provider or provider_name)

        params.update(overrides)
        return params

    def _extract_text_content(self, response: Mapping[str, Any]) -> str:
        """Return the first text part from either response shape.

        Anthropic-style responses carry a top-level `content` list of parts;
        OpenAI-style (LiteLLM) responses carry `choices[0].message.content`,
        which is either a string or a list of parts.
        """

        parts: object | None = response.get("content")
        if parts is None:
            choices = response.get("choices")
            if not isinstance(choices, Sequence) or not choices:
                raise GenerationFailed("LLM response did not include any choices.")
            first_choice = cast(Sequence[Mapping[str, object]], choices)[0]
            message_value = first_choice.get("message")
            if not isinstance(message_value, Mapping):
                raise GenerationFailed("LLM response missing message object.")
            parts = cast(Mapping[str, Any], message_value).get("content")

        text = self._first_text_part(parts)
        if not text or not text.strip():
            raise GenerationFailed("LLM response contained no text.")
        return text

    @staticmethod
    def _first_text_part(parts: object) -> str | None:
        if isinstance(parts, str):
            return parts
        if not isinstance(parts, Sequence):
            return None
        for part in parts:
            if isinstance(part, Mapping) and part.get("type") == "text":
                text = part.get("text")
                return text if isinstance(text, str) else None
        return None

    def _normalise_response(self, raw_response: Any) -> Dict[str, Any]:
        if isinstance(raw_response, dict):
            return cast(Dict[str, Any], raw_response)
        model_dump = getattr(raw_response, "model_dump", None)
        if callable(model_dump):
            candidate = model_dump()
            if isinstance(candidate, dict):
                return cast(Dict[str, Any], candidate)
        dict_method = getattr(raw_response, "dict", None)
        if callable(dict_method):
            candidate = dict_method()
            if isinstance(candidate, dict):
                return cast(Dict[str, Any], candidate)
        raise GenerationFailed(
            f"Unexpected LLM response type: {type(raw_response).__name__}"
        )
