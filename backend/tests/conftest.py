import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.services import llm_service

JOB_AD = (
    "We need a rockstar ninja developer who can hit the ground running in our fast-paced team."
)

MODEL_RESULT = {
    "bias_score": 10,
    "issues": [{"type": "jargon", "note": "'rockstar ninja' is coded language"}],
    "reading_level": "Flesch ~62",
    "rewrite": "Clean ad text",
    "changelog": [{"before": "rockstar ninja", "after": "software developer", "reason": "plain"}],
    "suggested_additions": ["[Add salary band]"],
}


def make_settings(**overrides) -> Settings:
    values = {"allowed_origins": "", "openai_api_key": "sk-test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def completion_response(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=None,
    )


class FakeCompletion:
    """Stands in for litellm.acompletion and records each call."""

    def __init__(self, content=None, error=None):
        self.content = json.dumps(MODEL_RESULT) if content is None else content
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return completion_response(self.content)


@pytest.fixture
def settings():
    return make_settings(allowed_origins="https://jobs.example.nz, https://app.example.nz")


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def fake_completion(monkeypatch):
    fake = FakeCompletion()
    monkeypatch.setattr(llm_service, "acompletion", fake)
    return fake
