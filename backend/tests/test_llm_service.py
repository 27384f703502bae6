import unittest
from unittest.mock import MagicMock, patch

import httpx
import openai
from langchain_core.messages import AIMessage
from langchain_openai import ChatOpenAI

from runai.services import llm_service
from runai.services.llm_service import LLMServiceError, call_llm, get_llm

OPENAI_URL = "https://api.openai.com/v1/chat/completions"


def fake_llm(response=None, error=None):
    llm = MagicMock()
    if error is not None:
        llm.invoke.side_effect = error
    else:
        llm.invoke.return_value = response
    return llm


class TestGetLLM(unittest.TestCase):

    @patch.object(llm_service, "LLM_PROVIDER", "openai")
    @patch.object(llm_service, "LLM_API_KEY", "")
    def test_missing_api_key(self):
        with self.assertRaises(LLMServiceError) as ctx:
            get_llm("gpt-4o")
        self.assertEqual(str(ctx.exception), "OpenAI API key not configured")

    @patch.object(llm_service, "LLM_PROVIDER", "anthropic")
    def test_unknown_provider(self):
        with self.assertRaises(LLMServiceError):
            get_llm("gpt-4o")

    @patch.object(llm_service, "LLM_PROVIDER", "openai")
    @patch.object(llm_service, "LLM_API_KEY", "sk-test")
    def test_json_mode_requests_json_object(self):
        llm = get_llm("gpt-4o", temperature=0.7, max_tokens=2000, json_mode=True)
        self.assertIsInstance(llm, ChatOpenAI)
        self.assertEqual(llm.model_kwargs, {"response_format": {"type": "json_object"}})

    @patch.object(llm_service, "LLM_PROVIDER", "openai")
    @patch.object(llm_service, "LLM_API_KEY", "sk-test")
    def test_text_mode_has_no_response_format(self):
        llm = get_llm("gpt-4o-mini", temperature=0.7, max_tokens=500)
        self.assertEqual(llm.model_kwargs, {})


class TestCallLLM(unittest.TestCase):

    @patch.object(llm_service, "get_llm")
    def test_returns_content(self, mock_get_llm):
        mock_get_llm.return_value = fake_llm(AIMessage(
            content="Easy runs should feel conversational.",
            response_metadata={"token_usage": {"prompt_tokens": 120, "completion_tokens": 12}},
        ))

        reply = call_llm("system", "How fast are easy runs?", model="gpt-4o-mini", max_tokens=500)

        self.assertEqual(reply, "Easy runs should feel conversational.")
        mock_get_llm.assert_called_once_with(model="gpt-4o-mini", temperature=0.7, max_tokens=500, json_mode=False)
        messages = mock_get_llm.return_value.invoke.call_args.args[0]
        self.assertEqual(messages[0].content, "system")
        self.assertEqual(messages[1].content, "How fast are easy runs?")

    @patch.object(llm_service, "get_llm")
    def test_status_error_carries_status_code(self, mock_get_llm):
        request = httpx.Request("POST", OPENAI_URL)
        error = openai.APIStatusError("Service unavailable", response=httpx.Response(503, request=request), body=None)
        mock_get_llm.return_value = fake_llm(error=error)

        with self.assertRaises(LLMServiceError) as ctx:
            call_llm("system", "hello")

        self.assertEqual(str(ctx.exception), "OpenAI API error: 503")
        self.assertEqual(ctx.exception.status_code, 503)

    @patch.object(llm_service, "get_llm")
    def test_connection_error(self, mock_get_llm):
        error = openai.APIConnectionError(request=httpx.Request("POST", OPENAI_URL))
        mock_get_llm.return_value = fake_llm(error=error)

        with self.assertRaises(LLMServiceError) as ctx:
            call_llm("system", "hello")

        self.assertEqual(str(ctx.exception), "OpenAI API connection error")

    @patch.object(llm_service, "get_llm")
    def test_empty_content(self, mock_get_llm):
        mock_get_llm.return_value = fake_llm(AIMessage(content=""))

        with self.assertRaises(LLMServiceError) as ctx:
            call_llm("system", "hello", json_mode=True)

        self.assertEqual(str(ctx.exception), "Empty response from LLM")

    @patch.object(llm_service, "get_llm")
    def test_unexpected_error_is_wrapped(self, mock_get_llm):
        mock_get_llm.return_value = fake_llm(error=RuntimeError("socket closed"))

        with self.assertRaises(LLMServiceError) as ctx:
            call_llm("system", "hello")

        self.assertEqual(str(ctx.exception), "LLM call failed: socket closed")


if __name__ == '__main__':
    unittest.main()
