"""
Loader for the KPI summary (/api/kpis).

Payload: {valor_andamento, total_entradas, saving, total_encerrados},
all numeric. The values are projected straight into KPI slots and not
kept anywhere else.
"""

import logging

from ..api import ApiClient, ApiError
from ..config import KPI_SLOTS, KPIS_ENDPOINT
from .utils import safe_float, unwrap_envelope

logger = logging.getLogger(__name__)


def load_kpis(client: ApiClient) -> dict[str, float | None]:
    """Fetch the KPI summary.

    Returns
    -------
    Dict keyed by the KPI_SLOTS fields. A field that is missing or not
    numeric maps to None, which the formatters show as zero.

    Raises
    ------
    ServerError : success=false or no data.
    ApiError : transport failure or a payload that is not an object.
    """
    data = unwrap_envelope(client.get_envelope(KPIS_ENDPOINT), KPIS_ENDPOINT)
    if not isinstance(data, dict):
        raise ApiError(f"{KPIS_ENDPOINT}: expected an object, got {type(data).__name__}")

    kpis = {}
    for field in KPI_SLOTS:
        value = safe_float(data.get(field))
        if value is None:
            logger.warning("KPI field '%s' missing or not numeric: %r", field, data.get(field))
        kpis[field] = value

    logger.info("Loaded %d KPIs", len(kpis))
    return kpis
