"""Prompt injection scanner for LLM endpoints: response analysis, scanning, reports, CLI and HTTP API."""

__version__ = "0.1.0"