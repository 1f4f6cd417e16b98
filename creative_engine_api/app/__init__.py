"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (generation, brand DNA, exemplars) has a
service under ``services`` and exposes a router defined in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
