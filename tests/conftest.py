"""
Shared fixtures.

The hosted model is replaced by ``FakeChatModel``: its structured-output
runnable records the rendered messages and answers with whatever the test put
in ``response`` (an exception instance is raised instead).
"""

from __future__ import annotations

from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import BaseMessage
from langchain_core.runnables import RunnableLambda

from app.main import app


class FakeChatModel:
    def __init__(self) -> None:
        self.response: Any = None
        self.calls: list[list[BaseMessage]] = []
        self.schemas: list[type] = []
        self.model_names: list[str | None] = []

    def with_structured_output(self, schema: type, method: str | None = None) -> RunnableLambda:
        self.schemas.append(schema)

        def _respond(messages: list[BaseMessage]) -> Any:
            self.calls.append(messages)
            if isinstance(self.response, Exception):
                raise self.response
            return self.response

        return RunnableLambda(_respond)

    @property
    def last_prompt(self) -> str:
        """Text of the human message of the most recent call."""
        assert self.calls, "the model was never invoked"
        return str(self.calls[-1][1].content)


@pytest.fixture
def fake_chat_model(monkeypatch: pytest.MonkeyPatch) -> FakeChatModel:
    fake = FakeChatModel()

    def _get_chat_model(model: str | None = None, **kwargs: Any) -> FakeChatModel:
        fake.model_names.append(model)
        return fake

    monkeypatch.setattr("app.core.genai_client.get_chat_model", _get_chat_model)
    return fake


@pytest.fixture
def client(fake_chat_model: FakeChatModel) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
