"""Base exception for all impedance meter errors."""

from typing import Any, Dict, Optional


class LCZError(Exception):
    """Base class carrying a message, structured context and a recovery flag."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = False
