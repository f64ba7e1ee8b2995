"""Validation check result type."""

from __future__ import annotations

from pydantic import BaseModel


class CheckResult(BaseModel):
    """Result of a single numerical sanity check."""

    name: str
    passed: bool
    value: float = 0.0
    threshold: float = 0.0
    message: str = ""
