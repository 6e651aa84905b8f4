"""
Loader for the process list (/api/processes).

Payload: [{processo, valor, tipo, data, responsavel}, ...]. Server order
is kept and duplicates pass through. `data` is display text and is never
parsed as a date.
"""

import logging

import pandas as pd

from ..api import ApiClient, ApiError
from ..config import PROCESS_COLUMNS, PROCESSES_ENDPOINT
from .utils import safe_float, safe_text, unwrap_envelope

logger = logging.getLogger(__name__)


def empty_processes() -> pd.DataFrame:
    """Process table with the expected columns and no rows."""
    return pd.DataFrame(columns=PROCESS_COLUMNS)


def build_processes_frame(records: list[dict]) -> pd.DataFrame:
    """Normalise raw process records into a DataFrame.

    Columns are PROCESS_COLUMNS in that order. Text fields become str
    (missing -> ""), `valor` becomes float (missing -> NaN). Extra fields
    are dropped.
    """
    if not records:
        return empty_processes()

    rows = []
    for record in records:
        rows.append({
            "processo": safe_text(record.get("processo")),
            "valor": safe_float(record.get("valor")),
            "tipo": safe_text(record.get("tipo")),
            "data": safe_text(record.get("data")),
            "responsavel": safe_text(record.get("responsavel")),
        })

    df = pd.DataFrame(rows, columns=PROCESS_COLUMNS)
    df["valor"] = pd.to_numeric(df["valor"], errors="coerce")
    return df


def load_processes(client: ApiClient) -> pd.DataFrame:
    """Fetch the full process list.

    Raises
    ------
    ServerError : success=false or no data.
    ApiError : transport failure or a payload that is not a list of objects.
    """
    data = unwrap_envelope(client.get_envelope(PROCESSES_ENDPOINT), PROCESSES_ENDPOINT)
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise ApiError(f"{PROCESSES_ENDPOINT}: expected a list of process records")

    df = build_processes_frame(data)
    logger.info("Loaded %d processes", len(df))
    return df
