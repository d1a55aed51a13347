import io

import pytest

from ostepdemos.threads_demo import (
    MyArg,
    MyRet,
    main,
    run_t0,
    run_t1,
    thread_create,
    thread_create_simple_args,
    thread_create_with_return_args,
)


def test_thread_create_prints_arguments_then_done():
    out = io.StringIO()
    thread_create(MyArg(10, 20), out)
    assert out.getvalue().splitlines() == ["10 20", "done"]


def test_thread_create_defaults_to_source_arguments():
    out = io.StringIO()
    thread_create(out=out)
    assert out.getvalue().splitlines()[0] == "10 20"


def test_simple_args_returns_value_plus_one():
    out = io.StringIO()
    result = thread_create_simple_args(100, out)
    assert result == 101
    assert out.getvalue().splitlines() == ["100", f"returned {result}"]


def test_simple_args_with_other_value():
    out = io.StringIO()
    result = thread_create_simple_args(-5, out)
    assert result - 1 == -5
    assert out.getvalue().splitlines()[0] == "-5"


def test_return_args_returns_structure():
    out = io.StringIO()
    rvals = thread_create_with_return_args(MyArg(10, 20), out)
    assert rvals == MyRet(1, 2)
    assert out.getvalue().splitlines() == ["args 10 20", "returned 1 2"]


def test_t0_prints_both_letters_between_begin_and_end():
    out = io.StringIO()
    run_t0(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "main: begin"
    assert lines[-1] == "main: end"
    assert sorted(lines[1:-1]) == ["A", "B"]


@pytest.mark.parametrize("loops", [0, 1, 1000])
def test_t1_counter_is_bounded(loops):
    out = io.StringIO()
    counter = run_t1(loops, out)
    assert 0 <= counter <= 2 * loops
    if loops:
        assert counter >= loops
    text = out.getvalue()
    assert f" [counter: {counter}]" in text
    assert f" [should: {2 * loops}]" in text
    lines = text.splitlines()
    assert "A: done" in lines and "B: done" in lines


def test_main_runs_t0(capsys):
    assert main(["t0"]) == 0
    assert "main: end" in capsys.readouterr().out


def test_main_t1_requires_loopcount(capsys):
    assert main(["t1"]) == 1
    assert "usage" in capsys.readouterr().err


def test_main_rejects_unknown_command(capsys):
    assert main(["bogus"]) == 1
    assert "usage" in capsys.readouterr().err