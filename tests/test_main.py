"""Tests for the console runner."""

from unittest.mock import patch

import main
from valor_causa.api import ApiClient
from valor_causa.scheduler import RefreshScheduler

from conftest import BASE_URL, ok


def test_single_refresh_prints_view(session, capsys):
    with patch.object(main, "resolve_base_url", return_value=BASE_URL), \
            patch.object(main, "ApiClient", side_effect=lambda url: ApiClient(url, session=session)):
        assert main.main(["--search", "bruno"]) == 0

    out = capsys.readouterr().out
    assert "R$ 1.000,00" in out
    assert "Top 10 Causas por Valor" in out
    assert "[ PROCESSOS ] 1 linhas" in out
    assert "0002-23 | R$ 500,00 | Cível | 15/03/2024 | Bruno" in out
    assert session.closed


def test_failed_refresh_prints_error_banner(session, capsys):
    session.routes.pop("/api/kpis")
    with patch.object(main, "resolve_base_url", return_value=BASE_URL), \
            patch.object(main, "ApiClient", side_effect=lambda url: ApiClient(url, session=session)):
        main.main([])

    out = capsys.readouterr().out
    assert "[ERRO] Erro de conexão ao carregar KPIs" in out


def test_watch_filters_and_prints_after_each_refresh(session, processes_payload, capsys):
    def one_tick(scheduler, timeout=None):
        extra = {"processo": "0004-24", "valor": 10, "tipo": "Cível", "data": "01/05/2024", "responsavel": "Bruno Lima"}
        session.routes["/api/processes"] = ok(processes_payload + [extra])
        scheduler.cycle()
        return True

    with patch.object(main, "resolve_base_url", return_value=BASE_URL), \
            patch.object(main, "ApiClient", side_effect=lambda url: ApiClient(url, session=session)), \
            patch.object(RefreshScheduler, "start", autospec=True, side_effect=lambda self: self), \
            patch.object(RefreshScheduler, "wait", autospec=True, side_effect=one_tick):
        assert main.main(["--watch", "--search", "bruno", "--interval", "60"]) == 0

    out = capsys.readouterr().out
    first, second = out.split("[ PROCESSOS ]")[1:]
    assert first.startswith(" 1 linhas")
    assert second.startswith(" 2 linhas")
    assert "0004-24 | R$ 10,00 | Cível | 01/05/2024 | Bruno Lima" in second
    assert "Carla" not in out
    assert session.closed
