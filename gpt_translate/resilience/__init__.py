"""Structured error hierarchy for gpt-translate."""
