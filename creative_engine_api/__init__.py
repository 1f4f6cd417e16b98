"""
Top‑level package for the Creative Engine API.

This file makes ``creative_engine_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``creative_engine_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
