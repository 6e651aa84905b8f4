"""
Valor da Causa: Interactive Dashboard

Run with:  streamlit run app.py
"""

import logging
import os
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent))

from valor_causa.api import ApiClient
from valor_causa.config import (
    CHART_REGISTRY,
    KPI_SLOTS,
    PLOTLY_CONFIG,
    REFRESH_INTERVAL_SECONDS,
    SEARCH_INPUT_ID,
    resolve_base_url,
)
from valor_causa.dashboard import Dashboard
from valor_causa.table import render_table

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Dashboard de Valor da Causa",
    page_icon="⚖️",
    layout="wide",
)

TABLE_CSS = """
<style>
table.processes { width: 100%; border-collapse: collapse; font-size: 14px; }
table.processes th { text-align: left; padding: 12px 24px; color: #64748b;
                     font-size: 12px; text-transform: uppercase; background: #f8fafc; }
table.processes td { padding: 16px 24px; border-top: 1px solid #e2e8f0; color: #64748b; }
table.processes td.processo { color: #111827; font-weight: 500; white-space: nowrap; }
table.processes td.valor { color: #111827; font-weight: 600; white-space: nowrap; }
table.processes td.data { white-space: nowrap; }
table.processes tr:hover { background: #f9fafb; }
table.processes tr.message td { text-align: center; }
table.processes tr.message.error td { color: #ef4444; }
</style>
"""


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------
def get_dashboard() -> Dashboard:
    """One Dashboard per browser session, bound to the page's own host."""
    if "dashboard" not in st.session_state:
        host = st.context.headers.get("Host")
        st.session_state.dashboard = Dashboard(ApiClient(resolve_base_url(host)))
    return st.session_state.dashboard


def on_search() -> None:
    get_dashboard().search(st.session_state[SEARCH_INPUT_ID])


# ---------------------------------------------------------------------------
# Helper: KPI card
# ---------------------------------------------------------------------------
def kpi_card(label: str, value: str, color: str = "#3b82f6"):
    st.markdown(
        f"""
        <div style="background: #ffffff; border-left: 4px solid {color};
                    border-radius: 8px; padding: 16px; margin-bottom: 8px;
                    box-shadow: 0 1px 2px rgba(0,0,0,0.05);">
            <div style="font-size: 13px; color: #64748b; font-weight: 600; text-transform: uppercase;">{label}</div>
            <div style="font-size: 28px; font-weight: 700; color: #1e293b; margin: 4px 0;">{value}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


# ===========================================================================
# Live panel: refreshed by Streamlit every REFRESH_INTERVAL_SECONDS
# ===========================================================================
@st.fragment(run_every=REFRESH_INTERVAL_SECONDS)
def live_panel():
    dashboard = get_dashboard()
    if dashboard.refresh_due():
        dashboard.refresh()
    view = dashboard.view

    for message in view.errors.values():
        st.warning(message)

    # KPI cards
    cols = st.columns(len(KPI_SLOTS))
    for i, spec in enumerate(KPI_SLOTS.values()):
        with cols[i]:
            kpi_card(spec["label"], view.text(spec["slot"]))

    st.divider()

    # Charts: top10 full width, the other two side by side
    charts = list(CHART_REGISTRY.values())
    top, rest = charts[0], charts[1:]

    figure = view.chart(top["container"])
    if figure is not None:
        st.plotly_chart(figure, use_container_width=True, config=PLOTLY_CONFIG, key=top["container"])

    cols = st.columns(len(rest))
    for col, spec in zip(cols, rest):
        with col:
            figure = view.chart(spec["container"])
            if figure is not None:
                st.plotly_chart(figure, use_container_width=True, config=PLOTLY_CONFIG, key=spec["container"])

    st.divider()

    # Process table
    st.subheader("Processos")
    st.text_input(
        "Buscar processos",
        key=SEARCH_INPUT_ID,
        on_change=on_search,
        placeholder="Buscar por processo, tipo ou responsável...",
    )
    st.markdown(TABLE_CSS + render_table(view.table_rows), unsafe_allow_html=True)


st.title("Dashboard de Valor da Causa")
st.caption(f"Atualização automática a cada {REFRESH_INTERVAL_SECONDS // 60} minutos")
live_panel()
