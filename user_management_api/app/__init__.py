"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: configuration and logging live in ``core``, request and
response models in ``schemas``, the in‑memory user store in
``services`` and the HTTP routes in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
