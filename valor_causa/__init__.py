"""
Valor da Causa: dashboard client for the legal-case value backend.

Fetches KPI totals, chart series and the process list from the backend
HTTP API and turns them into dashboard content: KPI tiles, Plotly bar
and donut charts, and a searchable process table, refreshed every five
minutes.

To render in Streamlit:
    Build a Dashboard around an ApiClient, call refresh() when
    refresh_due() says so, and draw dashboard.view (see app.py).

To point at another backend:
    Set the API_URL environment variable. Pages served from localhost
    always use config.LOCAL_API_URL.

To add a chart:
    Add an entry to config.CHART_REGISTRY mapping the series key of the
    /api/charts payload to its container, kind and title.
"""
