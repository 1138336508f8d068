"""
Top‑level package for the DevTalk Person API.

This file makes ``devtalk_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``devtalk_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
