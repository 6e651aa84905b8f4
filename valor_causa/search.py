"""Free-text search over the process list."""

import pandas as pd

from .config import SEARCH_FIELDS


def filter_processes(processes: pd.DataFrame, term: str | None) -> pd.DataFrame:
    """Return the processes matching `term`, in their original order.

    The term is trimmed and lowercased. A blank term matches everything;
    otherwise a row matches when any SEARCH_FIELDS value contains the
    term as a plain, case-insensitive substring. The input is not modified.
    """
    term = (term or "").strip().lower()
    if not term or processes.empty:
        return processes

    mask = pd.Series(False, index=processes.index)
    for field in SEARCH_FIELDS:
        text = processes[field].fillna("").astype(str).str.lower()
        mask |= text.str.contains(term, regex=False)

    return processes[mask]
