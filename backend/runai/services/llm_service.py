import logging
from typing import Optional

import openai
from langchain_ollama import ChatOllama
from langchain_openai import ChatOpenAI
from langchain_core.messages import HumanMessage, SystemMessage
from langfuse import observe, get_client

from runai.config import (
    LLM_PROVIDER,
    LLM_API_KEY,
    LLM_MODEL,
    CHAT_MODEL,
    OLLAMA_URL,
    LANGFUSE_PUBLIC_KEY,
    LANGFUSE_SECRET_KEY,
)

logger = logging.getLogger(__name__)

"""
LLM Service
-----------
Single entry point for chat-completion calls. Both coach handlers go through
`call_llm`, which raises `LLMServiceError` on any upstream failure so callers
decide how to surface it.
"""

LANGFUSE_ENABLED = bool(LANGFUSE_PUBLIC_KEY and LANGFUSE_SECRET_KEY)

# Plan generation needs a strong structured-output model; chat runs on a cheap one.
DEFAULT_MODELS = {
    "openai": "gpt-4o",
    "openrouter": "google/gemini-2.0-flash-001",
    "ollama": "gpt-oss:120b-cloud",
}

DEFAULT_CHAT_MODELS = {
    "openai": "gpt-4o-mini",
    "openrouter": "google/gemini-2.0-flash-001",
    "ollama": "gpt-oss:120b-cloud",
}

# Base URLs for OpenAI-compatible providers
PROVIDER_URLS = {
    "openrouter": "https://openrouter.ai/api/v1",
    "openai": None,  # Uses default OpenAI URL
}

PLAN_MODEL_NAME = LLM_MODEL or DEFAULT_MODELS.get(LLM_PROVIDER, "gpt-4o")
CHAT_MODEL_NAME = CHAT_MODEL or LLM_MODEL or DEFAULT_CHAT_MODELS.get(LLM_PROVIDER, "gpt-4o-mini")


class LLMServiceError(Exception):
    """Raised when the completion API cannot produce a reply."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def get_llm(model: str, temperature: float = 0.7, max_tokens: int = 2000, json_mode: bool = False):
    """
    Factory function to get a configured LangChain Chat Model instance.
    Supports: OpenAI, OpenRouter, Ollama (Local)
    """
    if LLM_PROVIDER == "ollama":
        return ChatOllama(
            base_url=OLLAMA_URL,
            model=model,
            temperature=temperature,
            num_predict=max_tokens,
            format="json" if json_mode else "",
            client_kwargs={"timeout": 120.0},
        )

    if LLM_PROVIDER not in PROVIDER_URLS:
        raise LLMServiceError(f"Unknown LLM provider '{LLM_PROVIDER}'")

    if not LLM_API_KEY:
        raise LLMServiceError("OpenAI API key not configured")

    model_kwargs = {}
    if json_mode:
        model_kwargs["response_format"] = {"type": "json_object"}

    return ChatOpenAI(
        model=model,
        api_key=LLM_API_KEY,
        base_url=PROVIDER_URLS.get(LLM_PROVIDER),
        temperature=temperature,
        max_tokens=max_tokens,
        model_kwargs=model_kwargs,
        timeout=60.0,
        max_retries=0,
    )


def _log_usage(response, model: str, temperature: float, max_tokens: int, mode: str):
    metadata = response.response_metadata or {}

    # Ollama reports counts at the top level; OpenAI-compatible providers nest them under token_usage
    input_tokens = metadata.get("prompt_eval_count") or 0
    output_tokens = metadata.get("eval_count") or 0
    if input_tokens == 0 and output_tokens == 0:
        usage = metadata.get("token_usage") or metadata.get("usage") or {}
        input_tokens = usage.get("prompt_tokens") or usage.get("input_tokens") or 0
        output_tokens = usage.get("completion_tokens") or usage.get("output_tokens") or 0

    total_tokens = input_tokens + output_tokens
    logger.info(f"[LLM Stats] Input: {input_tokens}, Output: {output_tokens}, Total: {total_tokens}")

    if LANGFUSE_ENABLED:
        get_client().update_current_generation(
            model=model,
            usage_details={"input": input_tokens, "output": output_tokens, "total": total_tokens},
            model_parameters={"temperature": temperature, "max_tokens": max_tokens},
            metadata={"mode": mode},
        )


@observe(name="call_llm", as_type="generation")
def call_llm(
    system_prompt: str,
    user_prompt: str,
    model: Optional[str] = None,
    temperature: float = 0.7,
    max_tokens: int = 2000,
    json_mode: bool = False,
) -> str:
    """
    Sends one system/user message pair and returns the raw completion text.
    No retries: every failure surfaces as LLMServiceError.
    """
    model = model or PLAN_MODEL_NAME
    mode = "json" if json_mode else "text"
    logger.info(f"[LLM Service] Calling Model ({mode}): {model}")

    llm = get_llm(model=model, temperature=temperature, max_tokens=max_tokens, json_mode=json_mode)
    messages = [
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_prompt),
    ]

    try:
        response = llm.invoke(messages)
    except openai.APIStatusError as e:
        logger.error(f"[LLM Service] OpenAI API error: {e.status_code} {e.message}")
        raise LLMServiceError(f"OpenAI API error: {e.status_code}", status_code=e.status_code) from e
    except openai.APIConnectionError as e:
        logger.error(f"[LLM Service] Connection error: {e}")
        raise LLMServiceError("OpenAI API connection error") from e
    except Exception as e:
        logger.exception(f"[LLM Service] {mode} call error: {e}")
        raise LLMServiceError(f"LLM call failed: {e}") from e

    content = response.content
    if not content:
        logger.warning("[LLM Service] Empty content received.")
        raise LLMServiceError("Empty response from LLM")

    _log_usage(response, model, temperature, max_tokens, mode)
    return content
