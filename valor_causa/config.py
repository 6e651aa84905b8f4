"""
Configuration: backend origin, endpoints, page-surface identifiers,
chart registry, palette, constants.

KPI_SLOTS maps each KPI field of the /api/kpis payload to the slot it is
written into, its display label, and how it is formatted.

CHART_REGISTRY maps each series of the /api/charts payload to its
container, chart kind ("bar" or "pie"), and title.
"""

import os
from typing import Mapping

# ---------------------------------------------------------------------------
# Backend origin
# ---------------------------------------------------------------------------
LOCAL_API_URL = "http://localhost:5000"
DEFAULT_API_URL = "https://backend-7nl8.onrender.com"

# Name of the environment variable that overrides DEFAULT_API_URL
API_URL_ENV = "API_URL"


def resolve_base_url(host: str | None = None, environ: Mapping[str, str] | None = None) -> str:
    """Return the backend base URL for the page served from `host`.

    A localhost page talks to the local backend. Anything else uses the
    API_URL override when set, falling back to DEFAULT_API_URL.
    """
    if environ is None:
        environ = os.environ

    if host and "localhost" in host:
        return LOCAL_API_URL

    override = (environ.get(API_URL_ENV) or "").strip()
    return (override or DEFAULT_API_URL).rstrip("/")


def _timeout_from_env(environ: Mapping[str, str]) -> float | None:
    raw = (environ.get("API_TIMEOUT") or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


# None means requests wait indefinitely
REQUEST_TIMEOUT: float | None = _timeout_from_env(os.environ)

# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------
KPIS_ENDPOINT = "/api/kpis"
CHARTS_ENDPOINT = "/api/charts"
PROCESSES_ENDPOINT = "/api/processes"

# ---------------------------------------------------------------------------
# Refresh
# ---------------------------------------------------------------------------
REFRESH_INTERVAL_SECONDS = 300

# ---------------------------------------------------------------------------
# KPI slots
# ---------------------------------------------------------------------------
# format: "currency" or "number"
KPI_SLOTS: dict[str, dict] = {
    "valor_andamento": {
        "slot": "kpi-valor-andamento",
        "label": "Valor em Andamento",
        "format": "currency",
    },
    "total_entradas": {
        "slot": "kpi-total-entradas",
        "label": "Total de Entradas",
        "format": "number",
    },
    "saving": {
        "slot": "kpi-saving",
        "label": "Saving",
        "format": "currency",
    },
    "total_encerrados": {
        "slot": "kpi-total-encerrados",
        "label": "Total Encerrados",
        "format": "number",
    },
}

# Text shown in a KPI slot before the first successful load
KPI_PLACEHOLDER = "-"

# ---------------------------------------------------------------------------
# Chart registry
# ---------------------------------------------------------------------------
CHART_REGISTRY: dict[str, dict] = {
    "top10_causas": {
        "container": "chart-top10",
        "kind": "bar",
        "title": "Top 10 Causas por Valor",
    },
    "valor_por_tipo": {
        "container": "chart-tipo",
        "kind": "pie",
        "title": "Distribuição por Tipo de Ação",
    },
    "valor_por_responsavel": {
        "container": "chart-responsavel",
        "kind": "bar",
        "title": "Valor por Responsável",
    },
}

# ---------------------------------------------------------------------------
# Chart styling
# ---------------------------------------------------------------------------
BAR_COLOR = "#3b82f6"
BAR_LINE_COLOR = "#2563eb"

PIE_COLORS = [
    "#3b82f6", "#8b5cf6", "#10b981", "#f59e0b",
    "#ef4444", "#06b6d4", "#ec4899", "#84cc16",
    "#f97316", "#6366f1",
]
PIE_HOLE = 0.4

TITLE_FONT = {"size": 16, "color": "#1e293b"}
TRANSPARENT = "rgba(0,0,0,0)"

PLOTLY_CONFIG = {"responsive": True, "displayModeBar": False}

# ---------------------------------------------------------------------------
# Process table
# ---------------------------------------------------------------------------
PROCESS_COLUMNS = ["processo", "valor", "tipo", "data", "responsavel"]
PROCESS_HEADERS = ["Processo", "Valor", "Tipo", "Data", "Responsável"]

# Fields the search box matches against
SEARCH_FIELDS = ["processo", "tipo", "responsavel"]

TABLE_BODY_ID = "processes-tbody"
SEARCH_INPUT_ID = "search-input"

NO_RESULTS_MESSAGE = "Nenhum processo encontrado"
PROCESSES_SERVER_ERROR = "Erro ao carregar processos"
PROCESSES_CONNECTION_ERROR = "Erro de conexão"

# ---------------------------------------------------------------------------
# Locale
# ---------------------------------------------------------------------------
CURRENCY_SYMBOL = "R$"
THOUSANDS_SEPARATOR = "."
DECIMAL_SEPARATOR = ","
