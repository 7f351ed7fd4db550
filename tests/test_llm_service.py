from unittest.mock import MagicMock, patch

import requests

from travelai.services.llm_service import ChatCompletionLLMService, LLMConfig


def _http_response(status=200, body=None):
    response = MagicMock()
    response.ok = status < 400
    response.status_code = status
    response.text = "error body"
    response.json.return_value = body or {}
    return response


def test_missing_key_fails_without_network():
    service = ChatCompletionLLMService(api_key="")
    with patch("travelai.services.llm_service.requests.post") as post:
        result = service.generate_content([{"role": "user", "content": "hi"}])
    assert not result.success
    assert "OPENAI_API_KEY" in result.error
    post.assert_not_called()


def test_successful_completion():
    body = {"model": "gpt-4o", "choices": [{"message": {"content": '{"a": 1}'}, "finish_reason": "stop"}]}
    service = ChatCompletionLLMService(api_key="sk-test", api_url="https://example.test/chat")
    with patch("travelai.services.llm_service.requests.post", return_value=_http_response(body=body)) as post:
        result = service.generate_content([{"role": "user", "content": "hi"}], LLMConfig(temperature=0.2))

    assert result.success
    assert result.content == '{"a": 1}'
    assert result.finish_reason == "stop"
    sent = post.call_args.kwargs
    assert sent["headers"]["Authorization"] == "Bearer sk-test"
    assert sent["json"]["temperature"] == 0.2
    assert sent["json"]["response_format"] == {"type": "json_object"}


def test_text_mode_omits_response_format():
    body = {"choices": [{"message": {"content": "Hello"}, "finish_reason": "stop"}]}
    service = ChatCompletionLLMService(api_key="sk-test")
    with patch("travelai.services.llm_service.requests.post", return_value=_http_response(body=body)) as post:
        service.generate_content([{"role": "user", "content": "hi"}], LLMConfig(json_mode=False))
    assert "response_format" not in post.call_args.kwargs["json"]


def test_http_error_becomes_failure():
    service = ChatCompletionLLMService(api_key="sk-test")
    with patch("travelai.services.llm_service.requests.post", return_value=_http_response(status=429)):
        result = service.generate_content([{"role": "user", "content": "hi"}])
    assert not result.success
    assert "429" in result.error


def test_network_error_becomes_failure():
    service = ChatCompletionLLMService(api_key="sk-test")
    with patch("travelai.services.llm_service.requests.post", side_effect=requests.ConnectionError("down")):
        result = service.generate_content([{"role": "user", "content": "hi"}])
    assert not result.success
    assert result.content == ""
