"""
Shared utilities for the API loaders: envelope unwrapping and value
coercion.
"""

import logging
import math
from typing import Any

import pandas as pd

logger = logging.getLogger(__name__)


class ServerError(Exception):
    """The backend answered with success=false or without a payload."""

    def __init__(self, endpoint: str, error: str | None = None):
        self.endpoint = endpoint
        self.error = error
        super().__init__(f"{endpoint}: {error or 'no data in response'}")


def unwrap_envelope(envelope: dict, endpoint: str) -> Any:
    """Return the `data` member of a {success, data, error} envelope.

    Raises ServerError when success is falsy or data is missing.
    """
    data = envelope.get("data")
    if not envelope.get("success") or data is None:
        raise ServerError(endpoint, envelope.get("error"))
    return data


def safe_float(val: Any) -> float | None:
    """Coerce a value to a finite float, returning None for anything else."""
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, str):
        val = val.strip()
        if not val:
            return None
    try:
        result = float(val)
    except (ValueError, TypeError, OverflowError):
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_text(val: Any) -> str:
    """Coerce a value to display text; None and NaN become an empty string."""
    if val is None:
        return ""
    if isinstance(val, float) and pd.isna(val):
        return ""
    return str(val)
