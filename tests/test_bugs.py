import io

from ostepdemos.bugs import PR_STATE_INIT, PRThread, atomicity, deadlock, main, ordering


def _lines(out):
    return [line.strip() for line in out.getvalue().splitlines()]


def test_atomicity_fixed_uses_pid():
    out = io.StringIO()
    assert atomicity(True, check_delay=0.2, clear_delay=0.05, out=out) == 100
    lines = _lines(out)
    assert lines[0] == "main: begin"
    assert lines[-1] == "main: end"
    assert lines.index("t1: use!") < lines.index("t2: set to NULL")


def test_atomicity_bug_finds_field_cleared():
    out = io.StringIO()
    assert atomicity(False, check_delay=0.3, clear_delay=0.05, out=out) is None
    lines = _lines(out)
    assert lines.index("t2: set to NULL") < lines.index("t1: use!")


def test_atomicity_bug_hidden_when_clear_comes_late():
    out = io.StringIO()
    assert atomicity(False, check_delay=0.05, clear_delay=0.3, out=out) == 100


def test_deadlock_with_ordered_locks_completes():
    out = io.StringIO()
    assert deadlock(ordered=True, out=out, timeout=2.0) is True
    lines = _lines(out)
    assert "t1: L2 acquired" in lines
    assert "t2: L2 acquired" in lines
    assert lines[-1] == "main: end"


def test_deadlock_with_timeout_reports_consistently():
    out = io.StringIO()
    completed = deadlock(ordered=False, out=out, timeout=0.2)
    text = out.getvalue()
    assert "main: end" in text
    assert ("gave up" in text) == (not completed)


def test_ordering_fixed_reads_initial_state():
    out = io.StringIO()
    assert ordering(True, delay=0.05, out=out) == PR_STATE_INIT
    lines = _lines(out)
    assert "mMain: state is 0" in lines
    assert lines[-1] == "ordering: end"


def test_ordering_bug_reads_before_record_is_stored():
    out = io.StringIO()
    assert ordering(False, delay=0.2, out=out) is None
    assert "mMain: thread structure is not initialized" in _lines(out)


def test_prthread_runs_target_and_starts_in_init_state():
    ran = []
    thread = PRThread(lambda: ran.append("ran"), 0)
    thread.wait()
    assert ran == ["ran"]
    assert thread.state == PR_STATE_INIT


def test_main_ordering_fixed(capsys):
    assert main(["ordering_fixed"]) == 0
    assert "ordering: end" in capsys.readouterr().out


def test_main_rejects_unknown(capsys):
    assert main(["bogus"]) == 1
    assert "usage" in capsys.readouterr().err