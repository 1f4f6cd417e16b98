"""
Tests for prompt assembly and the generateContent round trip.
"""

import asyncio
import json
import logging

import httpx
import pytest

from creative_engine_api.app.core.config import settings
from creative_engine_api.app.core.logging_config import setup_logging
from creative_engine_api.app.services.errors import DNAError, GenerationError
from creative_engine_api.app.services.generation_service import (
    GenerationService,
    build_payload,
    build_system_prompt,
    build_user_prompt,
    extract_brief,
)
from tests.conftest import SAMPLE_DNA


USER_INPUT = {"product": "Cold brew", "audience": "Night owls"}


def test_user_prompt_embeds_compact_json():
    exemplars = [{"id": 1, "text": "Wake up happy"}]
    prompt = build_user_prompt({"tone": "warm"}, exemplars, USER_INPUT)
    lines = prompt.splitlines()
    assert lines[0] == 'Here is the Brand DNA: {"tone":"warm"}'
    assert lines[1] == 'Here are examples of our past work: [{"id":1,"text":"Wake up happy"}]'
    assert lines[2] == 'Now, generate a brief for this input: {"product":"Cold brew","audience":"Night owls"}'


def test_payload_carries_prompts_and_schema():
    payload = build_payload(SAMPLE_DNA, [], USER_INPUT)
    content = payload["contents"][0]
    assert content["role"] == "user"
    assert content["parts"][0]["text"] == build_system_prompt()
    assert "Night owls" in content["parts"][1]["text"]
    assert payload["generationConfig"] == {
        "responseMimeType": "application/json",
        "responseSchema": SAMPLE_DNA["formats"]["brief"],
    }


def test_payload_uses_voice_not_whole_dna():
    payload = build_payload(SAMPLE_DNA, [], USER_INPUT)
    user_prompt = payload["contents"][0]["parts"][1]["text"]
    assert "Cheerful and direct" in user_prompt
    assert "responseSchema" not in user_prompt
    assert '"formats"' not in user_prompt


@pytest.mark.parametrize(
    "dna",
    [
        {"formats": {"brief": {}}},
        {"voice": {}},
        {"voice": {}, "formats": {}},
        {"voice": {}, "formats": "brief"},
    ],
)
def test_payload_requires_voice_and_brief_schema(dna):
    with pytest.raises(GenerationError):
        build_payload(dna, [], USER_INPUT)


def test_extract_brief_parses_first_candidate():
    result = {"candidates": [{"content": {"parts": [{"text": '{"headline": "Smile"}'}]}}]}
    assert extract_brief(result) == {"headline": "Smile"}


@pytest.mark.parametrize(
    "result",
    [
        {},
        {"candidates": []},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": "```json\n{}\n```"}]}}]},
    ],
)
def test_extract_brief_rejects_bad_responses(result):
    with pytest.raises(GenerationError):
        extract_brief(result)


def test_generate_brief_returns_parsed_output(dna_file, exemplars_file, fake_model):
    exemplars_file.parent.mkdir(parents=True)
    exemplars_file.write_text(json.dumps([{"id": 5, "text": "Old ad"}]), encoding="utf-8")

    brief = asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))

    assert brief == {"headline": "Hi", "call_to_action": "Buy"}
    assert len(fake_model.requests) == 1
    request = fake_model.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/test-model:generateContent"
    assert request.headers["x-goog-api-key"] == "test-key"
    assert "key" not in request.url.params
    assert "Old ad" in fake_model.payload["contents"][0]["parts"][1]["text"]


def test_generate_brief_without_exemplars_file(dna_file, exemplars_file, fake_model):
    asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))
    user_prompt = fake_model.payload["contents"][0]["parts"][1]["text"]
    assert "Here are examples of our past work: []" in user_prompt


def test_non_2xx_response_raises(dna_file, exemplars_file, fake_model):
    fake_model.status = 403
    fake_model.body = {"error": {"message": "API key not valid"}}
    with pytest.raises(GenerationError, match="403"):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))


def test_unparsable_model_text_raises(dna_file, exemplars_file, fake_model):
    fake_model.reply_with_text("Here is your brief!")
    with pytest.raises(GenerationError):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))


def test_missing_api_key_raises_before_calling(dna_file, exemplars_file, fake_model, monkeypatch):
    monkeypatch.setattr(settings, "gemini_api_key", "")
    with pytest.raises(GenerationError):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))
    assert fake_model.requests == []


def test_transport_error_raises(dna_file, exemplars_file, fake_model, monkeypatch):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(GenerationService, "transport", httpx.MockTransport(boom))
    with pytest.raises(GenerationError):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))


def test_missing_dna_file_raises(tmp_path, exemplars_file, fake_model, monkeypatch):
    monkeypatch.setattr(settings, "dna_path", str(tmp_path / "nope.json"))
    with pytest.raises(DNAError):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))
    assert fake_model.requests == []


def test_non_json_success_body_raises(dna_file, exemplars_file, fake_model):
    fake_model.body = "not json"
    with pytest.raises(GenerationError, match="Failed to parse brief"):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))
    assert len(fake_model.requests) == 1


# =============================================================================
# CREDENTIALS IN LOGS
# =============================================================================


def test_api_key_stays_out_of_request_logs(dna_file, exemplars_file, fake_model, caplog):
    # Let httpx log its per-request line so the URL it reports is checked too.
    caplog.set_level(logging.INFO)
    caplog.set_level(logging.INFO, logger="httpx")

    asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))

    assert any(record.name == "httpx" for record in caplog.records)
    leaked = [record.getMessage() for record in caplog.records if "test-key" in record.getMessage()]
    assert leaked == []


def test_api_key_stays_out_of_error_logs(dna_file, exemplars_file, fake_model, caplog):
    caplog.set_level(logging.DEBUG)
    fake_model.status = 400
    fake_model.body = {"error": {"message": "bad request"}}

    with pytest.raises(GenerationError):
        asyncio.run(GenerationService.generate_brief("Cold brew", "Night owls"))

    assert all("test-key" not in record.getMessage() for record in caplog.records)


def test_setup_logging_quiets_http_client_loggers():
    logging.getLogger("httpx").setLevel(logging.NOTSET)
    setup_logging("DEBUG")
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
