"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields except
the Gemini API key, which must be supplied through ``GEMINI_API_KEY``
before brief generation will work.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Creative Engine API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Credentials and endpoint for the Generative Language API.  The key
    # is sent in the ``x-goog-api-key`` header and is never logged.
    gemini_api_key: str = os.getenv("GEMINI_API_KEY", "")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-preview-05-20")
    gemini_base_url: str = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
    gemini_timeout: float = float(os.getenv("GEMINI_TIMEOUT", "60"))

    # Locations of the two JSON documents.  Relative paths are resolved
    # against the project root by the ``storage`` module.
    dna_path: str = os.getenv("BRAND_DNA_PATH", "config/brand_dna.json")
    exemplars_path: str = os.getenv("EXEMPLARS_PATH", "data/exemplars.json")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
