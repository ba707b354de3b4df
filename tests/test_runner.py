import io
import contextlib

import pytest

from propcheck import *
from propcheck import runner

from helpers import identity

def run_check(p, **kwargs):
    sio = io.StringIO()
    result = check(p, outfile=sio, **kwargs)
    return result, sio.getvalue()

def run_check_nostdout(p, **kwargs):
    stdout = io.StringIO()
    with contextlib.redirect_stdout(stdout):
        out = run_check(p, **kwargs)

    assert stdout.getvalue() == ''
    return out

def bounded():
    return forAll(chooseInt(1, 501), 'bounded', identity, lambda x: (x <= 500, 'Number was too large'))

def always_fails():
    return forAll(chooseInt(1, 1000), 'always fails', identity, lambda x: (False, 'forced failure'))

def test_ok():
    result, out = run_check_nostdout(bounded(), trials=200, seed=1)
    assert result == Passed()
    assert 'OK' in out
    assert 'seed 1' in out
    assert '200 trial(s)' in out

def test_fail():
    result, out = run_check_nostdout(always_fails(), trials=10, seed=99)
    assert result.is_falsified()
    assert 'FAIL' in out
    assert 'forced failure' in out
    assert 'counterexample' in out
    assert repr(result.failed_case) in out
    assert 'seed=99' in out

def test_last_success_in_report():
    prop = forAll(chooseInt(0, 100), 'under fifty', identity, lambda x: x < 50)
    result, out = run_check(prop, trials=200, seed=5)
    assert result.is_falsified()
    if result.successes:
        assert 'last success' in out

def test_callable_takes_its_name():
    _, out = run_check(always_fails, trials=3, seed=1)
    assert 'In property `always_fails`' in out

def test_callable_result_takes_its_name():
    result, out = run_check(always_fails, trials=3, seed=1)
    assert result.name == 'always_fails'
    assert 'Checking `always_fails`' in out
    assert 'always fails' not in out

def test_callable_keeps_inner_names():
    def conjunction():
        return bounded() & always_fails()

    result, out = run_check(conjunction, trials=5, seed=1)
    assert result.name == 'always fails'
    assert 'Checking `conjunction`' in out
    assert 'In property `always fails`' in out

def test_callable_must_return_property():
    with pytest.raises(TypeError):
        run_check(lambda: 3)

def test_iterable_stops_at_first_failure():
    calls = []

    def spy():
        calls.append('spy')
        return bounded()

    result, out = run_check([bounded, always_fails, spy], trials=20, seed=3)
    assert result.is_falsified()
    assert result.name == 'always_fails'
    assert calls == []
    assert out.count('OK') == 1

def test_defaults_from_config(monkeypatch):
    seen = []

    def run(params):
        seen.append(params)
        return Passed()

    monkeypatch.setattr(CONFIG, 'trials', 17)
    monkeypatch.setattr(CONFIG, 'seed', 1234)
    run_check(Property(name='spy', run=run))
    assert seen[0].trials == 17
    assert seen[0].rng == SimpleRNG(1234)

    run_check(Property(name='spy', run=run), trials=3, seed=8)
    assert seen[1] == RunParameters(3, SimpleRNG(8))

def test_wall_clock_seed(monkeypatch):
    seen = []
    monkeypatch.setattr(CONFIG, 'seed', None)
    run_check(Property(name='spy', run=lambda params: seen.append(params) or Passed()), trials=1)
    assert isinstance(seen[0].rng, SimpleRNG)

def test_colour(monkeypatch):
    result = always_fails().run(RunParameters(5, 1))
    assert runner.RED not in runner.render(result)

    monkeypatch.setattr(CONFIG, 'colour', True)
    assert runner.render(result).startswith(runner.RED)

def test_expect_success():
    expectSuccess(bounded().run(RunParameters(200, 7)))

    with pytest.raises(AssertionError) as e:
        expectSuccess(always_fails().run(RunParameters(200, 7)))
    assert 'forced failure' in str(e.value)
    assert 'always fails' in str(e.value)

def test_expect_failure():
    expectFailure(always_fails().run(RunParameters(200, 7)))

    with pytest.raises(AssertionError) as e:
        expectFailure(bounded().run(RunParameters(200, 7)))
    assert 'Passed' in str(e.value)

def test_expect_rejects_non_results():
    with pytest.raises(TypeError):
        expectSuccess(True)
    with pytest.raises(TypeError):
        expectFailure(None)
