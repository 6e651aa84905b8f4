"""Tests for backend URL resolution."""

from valor_causa.config import DEFAULT_API_URL, LOCAL_API_URL, resolve_base_url


def test_localhost_uses_local_backend():
    assert resolve_base_url("localhost:8501", {"API_URL": "https://other.example"}) == LOCAL_API_URL


def test_override_used_for_deployed_host():
    env = {"API_URL": "https://api.example.com/"}
    assert resolve_base_url("dashboard.example.com", env) == "https://api.example.com"


def test_default_when_no_override():
    assert resolve_base_url("dashboard.example.com", {}) == DEFAULT_API_URL
    assert resolve_base_url(None, {"API_URL": "   "}) == DEFAULT_API_URL


def test_no_host_means_deployed():
    assert resolve_base_url(None, {"API_URL": "https://api.example.com"}) == "https://api.example.com"
