"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any


class JsonFormatter:
    """Generic JSON formatter for CLI output."""

    def format(self, data: Any) -> str:
        """Format data as JSON, keeping Hebrew text readable."""
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        if isinstance(data, dict | list | tuple):
            return json.dumps(data, default=str, ensure_ascii=False, indent=2)
        return json.dumps({"value": data}, default=str, ensure_ascii=False, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format an error response.

        Args:
            error: Error message or exception
            code: Exit code reported alongside the error

        Returns:
            JSON string
        """
        response: dict[str, Any] = {"success": False, "code": code}
        message = getattr(error, "message", None)
        if isinstance(message, str):
            response["error"] = message
            response["error_type"] = type(error).__name__
            if getattr(error, "hint", None):
                response["hint"] = error.hint  # type: ignore[union-attr]
            if getattr(error, "details", None):
                response["details"] = error.details  # type: ignore[union-attr]
        else:
            response["error"] = str(error)
        return json.dumps(response, default=str, ensure_ascii=False, indent=2)
