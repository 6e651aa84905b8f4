"""Backend API loaders: one per endpoint, each returning plain data."""

from .kpis import load_kpis
from .charts import load_charts
from .processes import load_processes, build_processes_frame, empty_processes
from .utils import ServerError

__all__ = [
    "load_kpis",
    "load_charts",
    "load_processes",
    "build_processes_frame",
    "empty_processes",
    "ServerError",
]
