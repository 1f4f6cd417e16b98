"""
Business logic for creative brief generation.

A brief is produced by a single call to the Generative Language API
(``models/{model}:generateContent``).  The request combines a fixed
system prompt, the ``voice`` section of the brand DNA, every stored
exemplar and the caller's product/audience input.  The brand DNA's
``formats.brief`` JSON Schema is passed as the response schema so the
model answers with a JSON document of the expected shape.

Nothing is retried or cached.  Every failure (missing DNA keys,
missing API key, transport errors, non‑2xx responses, unparsable
output) is raised as ``GenerationError``.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from creative_engine_api.app.core.config import settings
from creative_engine_api.app.services.dna_service import DNAService
from creative_engine_api.app.services.errors import GenerationError
from creative_engine_api.app.services.exemplar_service import ExemplarService

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Happy Face Ads' creative engine. Your sole purpose is to generate a "
    "creative brief in JSON format. Adhere strictly to the brand DNA and study the "
    "provided exemplars for style. Output nothing but the JSON object, conforming "
    "precisely to the requested schema. Do not include any commentary, pleasantries, "
    "or markdown formatting like ```json."
)


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def build_system_prompt() -> str:
    return SYSTEM_PROMPT


def build_user_prompt(voice: Any, exemplars: List[Dict[str, Any]], user_input: Dict[str, str]) -> str:
    """Embed the DNA voice, the exemplars and the request as compact JSON."""
    return (
        f"Here is the Brand DNA: {_compact(voice)}\n"
        f"Here are examples of our past work: {_compact(exemplars)}\n"
        f"Now, generate a brief for this input: {_compact(user_input)}"
    )


def build_payload(dna: Dict[str, Any], exemplars: List[Dict[str, Any]], user_input: Dict[str, str]) -> Dict[str, Any]:
    """Assemble the ``generateContent`` request body.

    Raises ``GenerationError`` when the DNA lacks ``voice`` or
    ``formats.brief``.
    """
    if not isinstance(dna, dict) or "voice" not in dna:
        raise GenerationError("Brand DNA is missing the 'voice' section.")
    formats = dna.get("formats")
    if not isinstance(formats, dict) or "brief" not in formats:
        raise GenerationError("Brand DNA is missing the 'formats.brief' schema.")

    return {
        "contents": [
            {
                "role": "user",
                "parts": [
                    {"text": build_system_prompt()},
                    {"text": build_user_prompt(dna["voice"], exemplars, user_input)},
                ],
            }
        ],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": formats["brief"],
        },
    }


def extract_brief(result: Dict[str, Any]) -> Any:
    """Parse the brief out of a ``generateContent`` response.

    The model's answer is the text of the first part of the first
    candidate, which must itself be a JSON document.
    """
    try:
        text = result["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        logger.error("Unexpected API response structure: %s", json.dumps(result, indent=2)[:2000])
        raise GenerationError("Failed to parse brief from AI response.")
    try:
        return json.loads(text)
    except ValueError as exc:
        logger.error("AI response is not valid JSON: %s", text[:2000])
        raise GenerationError("Failed to parse brief from AI response.") from exc


class GenerationService:
    """Service for producing creative briefs."""

    # Optional transport override for the HTTP client, used by tests to
    # stand in for the remote API.
    transport: Optional[httpx.AsyncBaseTransport] = None

    @classmethod
    async def generate_brief(cls, product: str, audience: str) -> Any:
        """Generate a brief for ``product`` aimed at ``audience``.

        Loads the DNA and exemplars, calls the model once and returns the
        parsed JSON brief.
        """
        dna = await DNAService.get_dna()
        exemplars = await ExemplarService.list_exemplars()
        payload = build_payload(dna, exemplars, {"product": product, "audience": audience})
        result = await cls._call_model(payload)
        brief = extract_brief(result)
        logger.info("Generated brief for product=%r audience=%r", product, audience)
        return brief

    @classmethod
    async def _call_model(cls, payload: Dict[str, Any]) -> Dict[str, Any]:
        """POST ``payload`` to the configured model and return the JSON body.

        Network errors and non‑2xx responses raise ``GenerationError``;
        the upstream error body is logged.
        """
        if not settings.gemini_api_key:
            raise GenerationError("GEMINI_API_KEY is not configured.")

        url = f"{settings.gemini_base_url.rstrip('/')}/models/{settings.gemini_model}:generateContent"
        try:
            async with httpx.AsyncClient(timeout=settings.gemini_timeout, transport=cls.transport) as client:
                response = await client.post(
                    url,
                    headers={
                        "Content-Type": "application/json",
                        "x-goog-api-key": settings.gemini_api_key,
                    },
                    json=payload,
                )
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", url, exc)
            raise GenerationError("API request failed.") from exc

        if not response.is_success:
            logger.error("API Error Response (%s): %s", response.status_code, response.text)
            raise GenerationError(f"API request failed with status {response.status_code}")

        try:
            return response.json()
        except ValueError as exc:
            logger.error("API returned a non-JSON body: %s", response.text[:2000])
            raise GenerationError("Failed to parse brief from AI response.") from exc
