import asyncio

import pytest

from bank_client import api
from scripts import bench_api, predict_smoke


def test_p95():
    assert bench_api.p95([]) == 0.0
    assert bench_api.p95([5.0, 1.0, 3.0]) == 3.0


def test_run_bench_counts_errors(backend_factory):
    _, client_factory = backend_factory(failures={"/api/model-info": (500, {"detail": "down"})})

    async def scenario():
        async with client_factory() as client:
            return await bench_api.run_bench(client, n=2)

    report = asyncio.run(scenario())

    assert report["/predict"]["n_ok"] == 2
    assert report["/api/model-info"]["n_ok"] == 0
    assert report["/api/model-info"]["n_errors"] == 2
    assert report["/api/model-info"]["p95_ms"] == 0.0


def test_predict_smoke_main(monkeypatch, backend_factory, capsys):
    app, client_factory = backend_factory()
    monkeypatch.setattr(predict_smoke, "build_client", lambda base_url=None: client_factory())

    code = predict_smoke.main(["--set", "age=52", "--set", "job=retired"])

    out = capsys.readouterr().out
    assert code == 0
    assert "71.60%" in out
    assert app.state.predict_bodies[-1]["age"] == 52
    assert app.state.predict_bodies[-1]["job"] == "retired"


def test_predict_smoke_reports_error(monkeypatch, unreachable_client_factory, capsys):
    monkeypatch.setattr(predict_smoke, "build_client", lambda base_url=None: unreachable_client_factory())

    assert predict_smoke.main([]) == 1
    assert "Terjadi kesalahan tidak dikenal." in capsys.readouterr().err


def test_predict_smoke_unknown_field_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        predict_smoke.main(["--set", "salary=1"])

    assert exc_info.value.code == 2
    assert "salary" in capsys.readouterr().err


def test_predict_smoke_set_without_value_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        predict_smoke.main(["--set", "age"])

    assert exc_info.value.code == 2
    assert "FIELD=VALUE" in capsys.readouterr().err
