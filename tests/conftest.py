"""Test configuration and shared fixtures."""

import pytest
import requests

from valor_causa.api import ApiClient

BASE_URL = "http://backend.test"


class FakeResponse:
    def __init__(self, payload=None, text=None, status_code=200):
        self._payload = payload
        self._text = text
        self.status_code = status_code

    def json(self):
        if self._text is not None:
            raise ValueError(f"not JSON: {self._text!r}")
        return self._payload


class FakeSession:
    """Serves canned JSON payloads by URL path, no network involved.

    `routes[path]` is either a payload (returned as the JSON body) or an
    exception instance (raised by get()).
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        path = url[len(BASE_URL):]
        if path not in self.routes:
            raise requests.ConnectionError(f"no route for {url}")
        result = self.routes[path]
        if isinstance(result, Exception):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)

    def close(self):
        self.closed = True


def ok(data):
    return {"success": True, "data": data}


def failed(error):
    return {"success": False, "error": error}


@pytest.fixture
def kpis_payload():
    return {"valor_andamento": 1000, "total_entradas": 5, "saving": 200, "total_encerrados": 3}


@pytest.fixture
def charts_payload():
    return {
        "top10_causas": {"labels": ["Causa A", "Causa B"], "values": [5000.0, 1500.5]},
        "valor_por_tipo": {"labels": ["Trabalhista", "Cível", "Tributária"], "values": [3000, 2000, 1500.5]},
        "valor_por_responsavel": {"labels": ["Ana", "Bruno"], "values": [4000, 2500.5]},
    }


@pytest.fixture
def processes_payload():
    return [
        {"processo": "0001-23", "valor": 1234.5, "tipo": "Trabalhista", "data": "01/02/2024", "responsavel": "Ana"},
        {"processo": "0002-23", "valor": 500, "tipo": "Cível", "data": "15/03/2024", "responsavel": "Bruno"},
        {"processo": "0003-24", "valor": None, "tipo": "Tributária", "data": "20/04/2024", "responsavel": "Carla"},
    ]


@pytest.fixture
def session(kpis_payload, charts_payload, processes_payload):
    return FakeSession({
        "/api/kpis": ok(kpis_payload),
        "/api/charts": ok(charts_payload),
        "/api/processes": ok(processes_payload),
    })


@pytest.fixture
def client(session):
    return ApiClient(BASE_URL, session=session)
