import asyncio
import os
from types import SimpleNamespace

os.environ.setdefault("LITELLM_LOCAL_MODEL_COST_MAP", "True")

import litellm  # noqa: E402

from toolcast import AgentSettings, FieldSpec, Message, RecordType, build_tool_descriptor  # noqa: E402
from toolcast.providers.litellm import LiteLLMAgent  # noqa: E402

USER = RecordType(name="UserInfo", fields=(FieldSpec("name", "str"), FieldSpec("age", "uint8")))


def fake_completion(calls, response):
    async def acompletion(**kwargs):
        calls.append(kwargs)
        return response

    return acompletion


def tool_call_response():
    call = SimpleNamespace(id="call_1", function=SimpleNamespace(name="UserInfo", arguments='{"name": "J", "age": 3}'))
    message = SimpleNamespace(content=None, tool_calls=[call], function_call=None)
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="tool_calls")])


def test_complete_sends_tools_and_credential(monkeypatch):
    calls = []
    monkeypatch.setattr(litellm, "acompletion", fake_completion(calls, tool_call_response()))
    agent = LiteLLMAgent("gpt-4o", api_key="sk-test", temperature=0)
    descriptor = build_tool_descriptor(USER)

    response = asyncio.run(agent.complete([Message.user("J is 3")], [descriptor]))

    assert response.tool_calls[0].name == "UserInfo"
    request = calls[0]
    assert request["model"] == "gpt-4o"
    assert request["messages"] == [{"role": "user", "content": "J is 3"}]
    assert request["tools"] == [descriptor.to_dict()]
    assert request["tool_choice"] == "auto"
    assert request["api_key"] == "sk-test"
    assert request["temperature"] == 0
    assert "api_base" not in request


def test_complete_without_tools(monkeypatch):
    calls = []
    message = SimpleNamespace(content="hello", tool_calls=None, function_call=None)
    response = SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="stop")])
    monkeypatch.setattr(litellm, "acompletion", fake_completion(calls, response))

    result = asyncio.run(LiteLLMAgent("gpt-4o").complete([Message.user("hi")], []))

    assert result.text == "hello"
    assert "tools" not in calls[0]
    assert "tool_choice" not in calls[0]
    assert "api_key" not in calls[0]


def test_from_settings():
    settings = AgentSettings(model="gpt-4o-mini", api_key="sk-x", api_base="http://localhost:4000")
    agent = LiteLLMAgent.from_settings(settings)
    assert agent.model == "gpt-4o-mini"
    assert agent.api_key == "sk-x"
    assert agent.api_base == "http://localhost:4000"
