"""
Dashboard orchestration.

This is the entry point for the Streamlit page and the console runner.
Dashboard owns the API client, the process store and the page surface:
refresh() fetches the three endpoints concurrently and applies each
result to the view on the calling thread, search() re-renders the table
from the stored processes.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

import pandas as pd

from .api import ApiClient
from .charts import CHART_BUILDERS
from .config import (
    CHART_REGISTRY,
    KPI_SLOTS,
    PROCESSES_CONNECTION_ERROR,
    PROCESSES_SERVER_ERROR,
    REFRESH_INTERVAL_SECONDS,
)
from .formatting import format_currency, format_number
from .loaders import ServerError, load_charts, load_kpis, load_processes
from .scheduler import RefreshScheduler
from .search import filter_processes
from .state import ProcessStore
from .table import render_message_row, render_rows
from .view import DashboardView

logger = logging.getLogger(__name__)

_FORMATTERS = {
    "currency": format_currency,
    "number": format_number,
}

# One worker per endpoint
_FETCH_WORKERS = 3


class Dashboard:
    def __init__(
        self,
        client: ApiClient,
        store: ProcessStore | None = None,
        view: DashboardView | None = None,
        interval: float = REFRESH_INTERVAL_SECONDS,
    ):
        self.client = client
        self.store = store if store is not None else ProcessStore()
        self.view = view if view is not None else DashboardView()
        self.interval = interval
        self.last_refresh: float | None = None
        # Kept across refreshes so each worker thread reuses its HTTP session
        self._pool = ThreadPoolExecutor(max_workers=_FETCH_WORKERS, thread_name_prefix="fetch")

    # -- refresh cycle -------------------------------------------------------

    def refresh(self) -> None:
        """Fetch KPIs, charts and processes and update the view.

        The three requests run in parallel and do not depend on each
        other; each result is applied as soon as it arrives. Failures are
        contained per component and never raised.
        """
        appliers = {
            load_kpis: self.apply_kpis,
            load_charts: self.apply_charts,
            load_processes: self.apply_processes,
        }

        # The interval runs from the start of a cycle, not its end
        self.last_refresh = time.monotonic()

        futures = {self._pool.submit(loader, self.client): apply for loader, apply in appliers.items()}
        for future in as_completed(futures):
            futures[future](future)

        logger.info("Refresh complete: %s", self.view.describe())

    def refresh_due(self, now: float | None = None) -> bool:
        """True before the first refresh and once `interval` has elapsed since the last."""
        if self.last_refresh is None:
            return True
        if now is None:
            now = time.monotonic()
        return now - self.last_refresh >= self.interval

    def start(self, after_refresh: Callable[[], None] | None = None) -> RefreshScheduler:
        """Initial load, then a running scheduler repeating it until stopped.

        `after_refresh` runs after every refresh on the same thread, so it
        always sees the view that refresh just produced.
        """
        if after_refresh is None:
            cycle = self.refresh
        else:
            def cycle():
                self.refresh()
                after_refresh()

        cycle()
        return RefreshScheduler(cycle, self.interval).start()

    def close(self) -> None:
        """Stop the fetch workers and close the client's sessions."""
        self._pool.shutdown(wait=True)
        if self.client is not None:
            self.client.close()

    # -- appliers ------------------------------------------------------------

    # A failure other than ServerError (transport, bad JSON, wrong payload
    # shape) is reported as a connection error.
    def apply_kpis(self, future) -> None:
        try:
            kpis = future.result()
        except ServerError as exc:
            logger.error("Error fetching KPIs: %s", exc.error)
            self.view.report_error("kpis", "Erro ao carregar KPIs")
            return
        except Exception as exc:
            logger.error("KPI request failed: %s", exc)
            self.view.report_error("kpis", "Erro de conexão ao carregar KPIs")
            return

        for field, spec in KPI_SLOTS.items():
            formatter = _FORMATTERS[spec["format"]]
            self.view.set_text(spec["slot"], formatter(kpis.get(field)))
        self.view.clear_error("kpis")

    def apply_charts(self, future) -> None:
        try:
            series = future.result()
        except ServerError as exc:
            logger.error("Error fetching charts: %s", exc.error)
            self.view.report_error("charts", "Erro ao carregar gráficos")
            return
        except Exception as exc:
            logger.error("Chart request failed: %s", exc)
            self.view.report_error("charts", "Erro de conexão ao carregar gráficos")
            return

        for key, data in series.items():
            spec = CHART_REGISTRY[key]
            figure = CHART_BUILDERS[spec["kind"]](data, spec["title"])
            self.view.set_chart(spec["container"], figure)
        self.view.clear_error("charts")

    def apply_processes(self, future) -> None:
        """Replace the store and show every process; on failure keep the store and show an error row."""
        try:
            processes = future.result()
        except ServerError as exc:
            logger.error("Error fetching processes: %s", exc.error)
            self.view.set_table_rows([render_message_row(PROCESSES_SERVER_ERROR, tone="error")])
            return
        except Exception as exc:
            logger.error("Process request failed: %s", exc)
            self.view.set_table_rows([render_message_row(PROCESSES_CONNECTION_ERROR, tone="error")])
            return

        self.store.replace(processes)
        self.render_table(self.store.snapshot())

    # -- table & search ------------------------------------------------------

    def render_table(self, processes: pd.DataFrame) -> None:
        self.view.set_table_rows(render_rows(processes))

    def search(self, term: str | None) -> pd.DataFrame:
        """Show the stored processes matching `term`; returns what was shown."""
        matches = filter_processes(self.store.snapshot(), term)
        self.render_table(matches)
        logger.debug("Search %r matched %d of %d processes", term, len(matches), len(self.store))
        return matches
