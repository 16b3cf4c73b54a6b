"""JSON reporter for CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict

from gitclean.status.result import CheckResult


def to_dict(result: CheckResult) -> Dict[str, Any]:
    """Convert CheckResult to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "directory": result.directory,
        "clean": result.clean,
        "count": len(result.files),
        "files": [f.to_dict() for f in result.files],
        "duration_ms": round(result.duration_ms, 2),
    }


def render(result: CheckResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
