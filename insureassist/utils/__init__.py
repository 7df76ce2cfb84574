from __future__ import annotations

from .llm_factory import get_generation_client, load_project_env
from .logging_setup import configure_logging

__all__ = ["configure_logging", "get_generation_client", "load_project_env"]
