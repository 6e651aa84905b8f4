"""
Loader for chart datasets (/api/charts).

Payload: {top10_causas?, valor_por_tipo?, valor_por_responsavel?}, each
shaped {labels: [str], values: [number]}. Series that are absent or have
no values are left out of the result, so nothing gets drawn for them.
"""

import logging

from ..api import ApiClient, ApiError
from ..config import CHARTS_ENDPOINT, CHART_REGISTRY
from .utils import safe_float, safe_text, unwrap_envelope

logger = logging.getLogger(__name__)


def _parse_series(key: str, raw) -> dict | None:
    """Validate one series; None when it should be skipped."""
    if raw is None:
        return None
    if not isinstance(raw, dict) or not isinstance(raw.get("values"), list):
        raise ApiError(f"{CHARTS_ENDPOINT}: series '{key}' has no values list")

    values = raw["values"]
    if not values:
        logger.info("Series '%s' is empty, skipping", key)
        return None

    labels = raw.get("labels") or []
    if len(labels) != len(values):
        logger.warning(
            "Series '%s' has %d labels for %d values", key, len(labels), len(values)
        )

    return {
        "labels": [safe_text(label) for label in labels],
        "values": [safe_float(v) for v in values],
    }


def load_charts(client: ApiClient) -> dict[str, dict]:
    """Fetch chart datasets.

    Returns
    -------
    Dict mapping CHART_REGISTRY keys to {"labels": [...], "values": [...]}
    for every series that is present and non-empty, in registry order.

    Raises
    ------
    ServerError : success=false or no data.
    ApiError : transport failure or a malformed series.
    """
    data = unwrap_envelope(client.get_envelope(CHARTS_ENDPOINT), CHARTS_ENDPOINT)
    if not isinstance(data, dict):
        raise ApiError(f"{CHARTS_ENDPOINT}: expected an object, got {type(data).__name__}")

    series = {}
    for key in CHART_REGISTRY:
        parsed = _parse_series(key, data.get(key))
        if parsed is not None:
            series[key] = parsed

    logger.info("Loaded %d of %d chart series", len(series), len(CHART_REGISTRY))
    return series
