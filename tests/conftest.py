import json

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.runnables import RunnableLambda

from gradewise.api.dependencies.suggestions import get_suggestion_client
from gradewise.main import app
from gradewise.schema.grading import ComponentInput, GradeRequest
from gradewise.services.suggestions.client import SuggestionClient
from gradewise.settings import settings

SUGGESTIONS_TEXT = (
    "Your final exam carries the most weight. Schedule weekly review "
    "sessions and work through past papers to lift that score."
)


def make_request(weights, scores) -> GradeRequest:
    """Build a GradeRequest from (homework, midterm, final_exam) tuples"""
    return GradeRequest(
        homework=ComponentInput(weight=weights[0], score=scores[0]),
        midterm=ComponentInput(weight=weights[1], score=scores[1]),
        final_exam=ComponentInput(weight=weights[2], score=scores[2]),
    )


def request_body(weights, scores) -> dict:
    return make_request(weights, scores).model_dump()


def _unreachable_model(prompt_value):
    raise ConnectionError("model endpoint unreachable")


@pytest.fixture
def scenario_a() -> GradeRequest:
    return make_request((30, 30, 40), (80, 90, 70))


@pytest.fixture
def fake_chat_model() -> FakeListChatModel:
    return FakeListChatModel(
        responses=[json.dumps({"suggestions": SUGGESTIONS_TEXT})]
    )


@pytest.fixture
def suggestion_client(fake_chat_model) -> SuggestionClient:
    return SuggestionClient(chat_model=fake_chat_model, timeout=None)


@pytest.fixture
def failing_client() -> SuggestionClient:
    return SuggestionClient(
        chat_model=RunnableLambda(_unreachable_model), timeout=None
    )


@pytest.fixture
def api_client(suggestion_client):
    app.dependency_overrides[get_suggestion_client] = lambda: suggestion_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_api_client(failing_client):
    app.dependency_overrides[get_suggestion_client] = lambda: failing_client
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_api_client(monkeypatch):
    """API client using the real dependency with no OpenAI key configured"""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    get_suggestion_client.cache_clear()
    with TestClient(app) as client:
        yield client
    get_suggestion_client.cache_clear()
