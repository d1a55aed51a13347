import struct

import pytest

from ostepdemos.pstack import PersistentStack, create_image, main, run_commands


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "ps.img"
    create_image(path, 4096)
    return path


def test_push_pop_lifo(image):
    with PersistentStack(image) as stack:
        for value in (7, 13, 47):
            assert stack.push(value)
        assert len(stack) == 3
        assert stack.pop() == 47
        assert stack.pop() == 13
        assert len(stack) == 1


def test_pop_empty_returns_none(image):
    with PersistentStack(image) as stack:
        assert stack.pop() is None
        assert len(stack) == 0


def test_documented_session_persists(image):
    with PersistentStack(image) as stack:
        assert run_commands(stack, ["7", "13", "47", "pop"]) == [47]
    with PersistentStack(image) as stack:
        assert run_commands(stack, ["pop", "pop", "99"]) == [13, 7]
    with PersistentStack(image) as stack:
        assert run_commands(stack, ["pop"]) == [99]


def test_full_stack_ignores_push(tmp_path):
    path = tmp_path / "small.img"
    create_image(path, 16)
    with PersistentStack(path) as stack:
        results = [stack.push(i) for i in range(stack.capacity + 1)]
        assert results[:-1] == [True] * stack.capacity
        assert results[-1] is False
        assert len(stack) == stack.capacity


def test_count_header_on_disk(image):
    with PersistentStack(image) as stack:
        stack.push(5)
        stack.push(-6)
    data = image.read_bytes()
    assert struct.unpack_from("=Q", data, 0)[0] == 2
    assert struct.unpack_from("=ii", data, 8) == (5, -6)


def test_bad_image_sizes(tmp_path):
    tiny = tmp_path / "tiny.img"
    create_image(tiny, 4)
    with pytest.raises(ValueError):
        PersistentStack(tiny)
    odd = tmp_path / "odd.img"
    create_image(odd, 10)
    with pytest.raises(ValueError):
        PersistentStack(odd)


def test_missing_image(tmp_path):
    with pytest.raises(FileNotFoundError):
        PersistentStack(tmp_path / "absent.img")


def test_push_out_of_range(image):
    with PersistentStack(image) as stack:
        with pytest.raises(ValueError):
            stack.push(2**40)
        assert len(stack) == 0


def test_main(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    create_image("ps.img", 4096)
    assert main(["7", "13", "47", "pop"]) == 0
    assert capsys.readouterr().out == "47\n"
    assert main(["pop", "pop"]) == 0
    assert capsys.readouterr().out == "13\n7\n"


def test_main_without_image(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["pop"]) == 1
    assert "pstack" in capsys.readouterr().err