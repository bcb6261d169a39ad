from types import SimpleNamespace

import pytest
from wordament import metrics
from wordament.metrics import StageTimer


def test_stages_in_first_run_order():
    timer = StageTimer()
    with timer.stage("search"):
        pass
    with timer.stage("parse"):
        pass
    assert list(timer.timings) == ["search", "parse"]


def test_repeated_stage_accumulates(monkeypatch):
    ticks = iter([0.0, 1.0, 1.002, 2.0, 2.003])
    monkeypatch.setattr(metrics, "time", SimpleNamespace(perf_counter=lambda: next(ticks)))
    timer = StageTimer()
    with timer.stage("search"):
        pass
    with timer.stage("search"):
        pass
    assert timer.timings["search"] == pytest.approx(5.0)


def test_stage_recorded_when_it_raises():
    timer = StageTimer()
    with pytest.raises(ValueError):
        with timer.stage("parse"):
            raise ValueError("bad cell")
    assert "parse" in timer.timings


def test_summary_includes_total():
    timer = StageTimer()
    with timer.stage("rank"):
        pass
    summary = timer.summary()
    assert set(summary) == {"rank", "total"}
    assert summary["total"] >= summary["rank"]
