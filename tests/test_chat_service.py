from travelai.models.chat import ChatMessage
from travelai.services.chat_service import APOLOGY, ChatService

from tests.mock_llm_service import MockLLMService, failure, success


def _history(n):
    return [ChatMessage(id=i + 1, sender="user" if i % 2 == 0 else "assistant", text=f"message {i + 1}")
            for i in range(n)]


def test_only_last_ten_messages_are_sent():
    mock = MockLLMService(success("**Where to Stay**\nNear the old town."))
    history = _history(14)

    result = ChatService(llm_service=mock).reply("Where should I stay?", history)

    sent = mock.calls[0]["messages"]
    assert sent[0]["role"] == "system"
    assert [m["content"] for m in sent[1:-1]] == [f"message {i}" for i in range(5, 15)]
    assert sent[-1] == {"role": "user", "content": "Where should I stay?"}
    assert mock.calls[0]["config"].json_mode is False
    assert result.status == "success"
    assert result.messages[-1].text.startswith("**Where to Stay**")


def test_roles_follow_sender():
    mock = MockLLMService(success("ok"))
    ChatService(llm_service=mock).reply("hi", _history(2))
    assert [m["role"] for m in mock.calls[0]["messages"][1:]] == ["user", "assistant", "user"]


def test_failure_appends_apology():
    history = _history(3)
    result = ChatService(llm_service=MockLLMService(failure())).reply("Best time for Bali?", history)

    assert result.fallbackUsed
    assert result.reply == APOLOGY
    assert len(result.messages) == 5
    assert result.messages[-2].sender == "user"
    assert result.messages[-2].text == "Best time for Bali?"
    assert result.messages[-1].sender == "assistant"
    assert [m.id for m in result.messages] == [1, 2, 3, 4, 5]
