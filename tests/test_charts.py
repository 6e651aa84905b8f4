"""Tests for the Plotly figure builders."""

from valor_causa.charts import build_bar_chart, build_pie_chart
from valor_causa.config import PIE_COLORS

SERIES = {"labels": ["Causa A", "Causa B"], "values": [5000.0, 1500.5]}


def test_bar_chart_labels_each_bar_with_currency():
    fig = build_bar_chart(SERIES, "Top 10 Causas por Valor")
    bar = fig.data[0]

    assert bar.type == "bar"
    assert list(bar.x) == ["Causa A", "Causa B"]
    assert list(bar.text) == ["R$ 5.000,00", "R$ 1.500,50"]
    assert fig.layout.title.text == "Top 10 Causas por Valor"
    assert fig.layout.xaxis.tickangle == -45
    assert fig.layout.paper_bgcolor == "rgba(0,0,0,0)"


def test_pie_chart_is_a_donut_with_cycling_palette():
    labels = [f"Tipo {i}" for i in range(12)]
    fig = build_pie_chart({"labels": labels, "values": list(range(1, 13))}, "Por tipo")
    pie = fig.data[0]

    assert pie.type == "pie"
    assert pie.hole == 0.4
    assert pie.textinfo == "label+percent"
    assert list(pie.marker.colors[:10]) == PIE_COLORS
    assert pie.marker.colors[10] == PIE_COLORS[0]
    assert pie.text[0] == "R$ 1,00"
    assert "%{text}" in pie.hovertemplate


def test_pie_hole_is_configurable():
    assert build_pie_chart(SERIES, "t", hole=0.6).data[0].hole == 0.6


def test_builders_are_deterministic():
    assert build_bar_chart(SERIES, "t").to_dict() == build_bar_chart(SERIES, "t").to_dict()
    assert build_pie_chart(SERIES, "t").to_dict() == build_pie_chart(SERIES, "t").to_dict()
