"""
Process table markup.

Rows are produced as `<tr>` strings so the Streamlit page can drop them
into a plain HTML table, the same way the KPI cards are drawn.
"""

from html import escape

import pandas as pd

from .config import NO_RESULTS_MESSAGE, PROCESS_COLUMNS, PROCESS_HEADERS, TABLE_BODY_ID
from .formatting import format_currency
from .loaders.utils import safe_text

_CELL = '<td class="{cls}">{text}</td>'


def render_message_row(message: str, tone: str = "muted") -> str:
    """Single row spanning the whole table, used for 'no results' and errors."""
    return (
        f'<tr class="message {tone}">'
        f'<td colspan="{len(PROCESS_COLUMNS)}">{escape(message)}</td>'
        "</tr>"
    )


def render_rows(processes: pd.DataFrame) -> list[str]:
    """One `<tr>` per process, in input order.

    An empty input gives a single NO_RESULTS_MESSAGE row.
    """
    if processes is None or processes.empty:
        return [render_message_row(NO_RESULTS_MESSAGE)]

    rows = []
    for record in processes.itertuples(index=False):
        cells = [
            _CELL.format(cls="processo", text=escape(safe_text(record.processo))),
            _CELL.format(cls="valor", text=escape(format_currency(record.valor))),
            _CELL.format(cls="tipo", text=escape(safe_text(record.tipo))),
            _CELL.format(cls="data", text=escape(safe_text(record.data))),
            _CELL.format(cls="responsavel", text=escape(safe_text(record.responsavel))),
        ]
        rows.append("<tr>" + "".join(cells) + "</tr>")
    return rows


def render_table_body(rows: list[str]) -> str:
    return "\n".join(rows)


def render_table(rows: list[str]) -> str:
    """Full table with header row around an already rendered body."""
    header = "".join(f"<th>{escape(h)}</th>" for h in PROCESS_HEADERS)
    return (
        '<table class="processes">'
        f"<thead><tr>{header}</tr></thead>"
        f'<tbody id="{TABLE_BODY_ID}">{render_table_body(rows)}</tbody>'
        "</table>"
    )
