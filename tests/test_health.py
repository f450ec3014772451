import pytest

from actdash.summary import HealthSymbol, classify_run, summarize_health

from fakes import make_run


def test_mixed_conclusions():
    runs = [make_run(c) for c in ("success", "failure", "skipped", "success", "success")]

    assert summarize_health(runs, 5) == [
        HealthSymbol.PASS,
        HealthSymbol.FAIL,
        HealthSymbol.NEUTRAL,
        HealthSymbol.PASS,
        HealthSymbol.PASS,
    ]


@pytest.mark.parametrize("conclusion", ["skipped", "cancelled", "neutral"])
def test_neutral_conclusions(conclusion):
    assert classify_run(make_run(conclusion)) == HealthSymbol.NEUTRAL


@pytest.mark.parametrize("conclusion", ["failure", "timed_out", "action_required", "startup_failure", None])
def test_other_conclusions_fail(conclusion):
    assert classify_run(make_run(conclusion)) == HealthSymbol.FAIL


def test_incomplete_run_is_unknown():
    assert classify_run(make_run(None, status="in_progress")) == HealthSymbol.UNKNOWN


def test_cap_examines_one_extra_run():
    runs = [make_run("success")] * 8

    assert len(summarize_health(runs, 5)) == 6
    assert len(summarize_health(runs, 2)) == 3


def test_empty_runs():
    assert summarize_health([], 5) == []


def test_symbols_are_strings():
    assert HealthSymbol.PASS == "pass"
    assert HealthSymbol.UNKNOWN.value == "neutral-unknown"
