"""
JSON file storage helpers.

The service keeps its state in two small JSON documents: the brand DNA
profile and the exemplars array.  This module resolves their locations
from ``settings``, reads and writes them, and seeds missing files on
application start (``init_storage``).  There is no locking: concurrent
writers race and the last one wins.
"""

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any

from .config import settings

logger = logging.getLogger(__name__)

# Bundled brand DNA used to seed a fresh installation.
DEFAULT_DNA_PATH = Path(__file__).resolve().parent.parent / "data" / "default_brand_dna.json"


def get_project_root() -> Path:
    """Return the repository root (the directory holding ``creative_engine_api``)."""
    return Path(__file__).resolve().parent.parent.parent.parent


def resolve_path(path: str) -> Path:
    """Resolve ``path`` against the project root unless it is absolute."""
    if os.path.isabs(path):
        return Path(path)
    return (get_project_root() / path).resolve()


def get_dna_path() -> Path:
    return resolve_path(settings.dna_path)


def get_exemplars_path() -> Path:
    return resolve_path(settings.exemplars_path)


def read_json(path: Path) -> Any:
    """Read and parse a UTF‑8 encoded JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any) -> None:
    """Serialise ``data`` with two‑space indentation and write it to ``path``.

    Parent directories are created as needed.  The file is rewritten in
    full on every call.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def init_storage() -> None:
    """Create the DNA and exemplars files if they do not exist yet.

    The DNA file is copied from the bundled default profile and the
    exemplars file starts as an empty array.  Existing files are left
    untouched.
    """
    dna_path = get_dna_path()
    if not dna_path.exists():
        dna_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(DEFAULT_DNA_PATH, dna_path)
        logger.info("Seeded brand DNA at %s", dna_path)

    exemplars_path = get_exemplars_path()
    if not exemplars_path.exists():
        write_json(exemplars_path, [])
        logger.info("Created empty exemplars file at %s", exemplars_path)
