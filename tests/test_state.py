"""Tests for the process store."""

from valor_causa.loaders import build_processes_frame
from valor_causa.state import ProcessStore


def test_starts_empty():
    store = ProcessStore()
    assert len(store) == 0
    assert list(store.snapshot().columns) == ["processo", "valor", "tipo", "data", "responsavel"]


def test_replace_is_wholesale(processes_payload):
    store = ProcessStore()
    store.replace(build_processes_frame(processes_payload))
    store.replace(build_processes_frame(processes_payload[:1]))

    assert len(store) == 1
    assert store.snapshot()["processo"].tolist() == ["0001-23"]
