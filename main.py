"""
Valor da Causa: console runner.

Runs the dashboard refresh against the backend without a browser and
prints what the page would show.

Usage:
    python main.py                       # one refresh
    python main.py --search trabalhista  # one refresh, then filter the table
    python main.py --watch               # refresh every 5 minutes until Ctrl+C
    python main.py --watch --search ana  # same, filtering the table after each refresh
"""

import argparse
import logging
import os
import re
import sys
from html import unescape
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from valor_causa.api import ApiClient
from valor_causa.config import (
    CHART_REGISTRY,
    KPI_SLOTS,
    REFRESH_INTERVAL_SECONDS,
    resolve_base_url,
)
from valor_causa.dashboard import Dashboard
from valor_causa.view import DashboardView

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

_CELL_RE = re.compile(r"<td[^>]*>(.*?)</td>")


def print_view(view: DashboardView) -> None:
    """Print KPI tiles, chart containers and the process table."""

    print("=" * 70)
    print("  DASHBOARD DE VALOR DA CAUSA")
    print("=" * 70)

    for message in view.errors.values():
        print(f"\n  [ERRO] {message}")

    print("\n[ KPIs ]")
    print("-" * 40)
    for spec in KPI_SLOTS.values():
        print(f"  {spec['label']:22s} | {view.text(spec['slot'])}")

    print("\n[ GRÁFICOS ]")
    print("-" * 40)
    for spec in CHART_REGISTRY.values():
        figure = view.chart(spec["container"])
        if figure is None:
            print(f"  {spec['title']:32s} | (vazio)")
            continue
        points = len(figure.data[0].values if spec["kind"] == "pie" else figure.data[0].y)
        print(f"  {spec['title']:32s} | {spec['kind']}, {points} itens")

    print(f"\n[ PROCESSOS ] {len(view.table_rows)} linhas")
    print("-" * 40)
    for row in view.table_rows:
        cells = [unescape(cell) for cell in _CELL_RE.findall(row)]
        print("  " + " | ".join(cells))

    print("=" * 70)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the Valor da Causa dashboard refresh in the console.")
    parser.add_argument("--host", help="host the page would be served from (localhost selects the local backend)")
    parser.add_argument("--search", help="filter the process table after loading")
    parser.add_argument("--watch", action="store_true", help="keep refreshing until interrupted")
    parser.add_argument("--interval", type=float, default=REFRESH_INTERVAL_SECONDS, help="seconds between refreshes")
    args = parser.parse_args(argv)

    base_url = resolve_base_url(args.host)
    logger.info("Backend: %s", base_url)
    dashboard = Dashboard(ApiClient(base_url), interval=args.interval)

    def show() -> None:
        if args.search:
            dashboard.search(args.search)
        print_view(dashboard.view)

    if not args.watch:
        dashboard.refresh()
        show()
        dashboard.close()
        return 0

    # After the initial load every cycle runs on the scheduler thread; this one only waits
    scheduler = dashboard.start(after_refresh=show)
    try:
        scheduler.wait()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        scheduler.stop()
        dashboard.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
