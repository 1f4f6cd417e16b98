"""
Pytest configuration for Creative Engine tests.

Every test gets its own DNA and exemplars files under ``tmp_path``;
``settings`` is patched to point at them.  Calls to the generative API
go through ``httpx.MockTransport`` so no real HTTP request is made.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from creative_engine_api.app.core.config import settings  # noqa: E402
from creative_engine_api.app.services.generation_service import GenerationService  # noqa: E402


SAMPLE_DNA = {
    "voice": {"tone": "Cheerful and direct", "avoid": ["jargon"]},
    "formats": {
        "brief": {
            "type": "OBJECT",
            "properties": {
                "headline": {"type": "STRING"},
                "call_to_action": {"type": "STRING"},
            },
            "required": ["headline", "call_to_action"],
        }
    },
}


@pytest.fixture
def dna_file(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "config" / "brand_dna.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(SAMPLE_DNA), encoding="utf-8")
    monkeypatch.setattr(settings, "dna_path", str(path))
    return path


@pytest.fixture
def exemplars_file(tmp_path, monkeypatch) -> Path:
    """Location of the exemplars file.  The file itself is not created."""
    path = tmp_path / "data" / "exemplars.json"
    monkeypatch.setattr(settings, "exemplars_path", str(path))
    return path


@pytest.fixture
def fake_model(monkeypatch):
    """Stand in for the Generative Language API.

    Set ``fake_model.status`` and ``fake_model.body`` to control the
    response; sent requests are collected in ``fake_model.requests``.
    """

    class FakeModel:
        def __init__(self):
            self.status = 200
            self.body = {
                "candidates": [
                    {"content": {"parts": [{"text": json.dumps({"headline": "Hi", "call_to_action": "Buy"})}]}}
                ]
            }
            self.requests = []

        def reply_with_text(self, text):
            self.body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if isinstance(self.body, (dict, list)):
                return httpx.Response(self.status, json=self.body)
            return httpx.Response(self.status, text=self.body)

        @property
        def payload(self):
            return json.loads(self.requests[-1].content)

    model = FakeModel()
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(settings, "gemini_model", "test-model")
    monkeypatch.setattr(settings, "gemini_base_url", "https://llm.test/v1beta")
    monkeypatch.setattr(GenerationService, "transport", httpx.MockTransport(model.handler))
    return model
