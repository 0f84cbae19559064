"""
Top‑level package for the Taskboard API.

Makes ``taskboard_api`` importable so that modules under ``app`` can be
referenced with fully qualified names such as
``taskboard_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
