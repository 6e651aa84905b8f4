"""
Page surface: everything the dashboard shows, kept as plain state.

The dashboard writes into a DashboardView; the Streamlit page (app.py)
and the console runner (main.py) only read from it. Content stays as it
was until something overwrites it, so a failed load leaves the previous
values on screen.
"""

import logging

import plotly.graph_objects as go

from .config import KPI_PLACEHOLDER, KPI_SLOTS, TABLE_BODY_ID
from .table import render_table_body

logger = logging.getLogger(__name__)


class DashboardView:
    """KPI slots, chart containers, the table body and the error banner."""

    def __init__(self) -> None:
        self.kpis: dict[str, str] = {spec["slot"]: KPI_PLACEHOLDER for spec in KPI_SLOTS.values()}
        self.charts: dict[str, go.Figure] = {}
        self.table_rows: list[str] = []
        self.errors: dict[str, str] = {}

    # -- writes ---------------------------------------------------------------

    def set_text(self, slot: str, text: str) -> None:
        if slot not in self.kpis:
            raise KeyError(f"Unknown KPI slot '{slot}'")
        self.kpis[slot] = text

    def set_chart(self, container: str, figure: go.Figure) -> None:
        """Place `figure` in `container`, replacing any previous chart."""
        self.charts[container] = figure

    def set_table_rows(self, rows: list[str]) -> None:
        self.table_rows = list(rows)

    def report_error(self, source: str, message: str) -> None:
        """Error hook for KPI and chart failures; shown as a banner."""
        logger.error(message)
        self.errors[source] = message

    def clear_error(self, source: str) -> None:
        self.errors.pop(source, None)

    # -- reads ----------------------------------------------------------------

    def text(self, slot: str) -> str:
        return self.kpis[slot]

    def chart(self, container: str) -> go.Figure | None:
        return self.charts.get(container)

    @property
    def table_body(self) -> str:
        return render_table_body(self.table_rows)

    def describe(self) -> dict:
        """Plain summary of what is on screen, for logging and the console runner."""
        return {
            "kpis": dict(self.kpis),
            "charts": sorted(self.charts),
            TABLE_BODY_ID: len(self.table_rows),
            "errors": dict(self.errors),
        }
