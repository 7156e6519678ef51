"""
Uniform response envelopes.

Every public operation returns exactly one serialized envelope: either
{"error": "..."} or {"data": ...}. An empty error string means success with
nothing to report.
"""

from __future__ import annotations

from typing import Any, Optional

from wnquery.core.models import DataResponse, ErrorResponse


def build_error(err: Optional[BaseException] = None) -> str:
    """Serialize an error envelope; `None` yields an empty error string."""
    return ErrorResponse(error="" if err is None else str(err)).model_dump_json()


def build_data(payload: Any) -> str:
    """Serialize a data envelope. Empty lists and mappings are valid data."""
    return DataResponse(data=payload).model_dump_json()
