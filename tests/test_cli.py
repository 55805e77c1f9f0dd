import io

import pytest

from numdrills.cli import main, swap


@pytest.mark.parametrize("a, b", [(3, 7), (0, 5), (-4, 9), (6, 6)])
def test_swap_exchanges(a, b):
    assert swap(a, b) == (b, a)


@pytest.mark.parametrize("a, b", [(3, 7), (0, 5), (-4, 9)])
def test_swap_twice_is_identity(a, b):
    assert swap(*swap(a, b)) == (a, b)


def test_main_with_arguments(capsys):
    assert main(["3", "7"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Number 1 before swapping:3",
        "Number 2 before swapping:7",
        "Number 1 after swaping:7",
        "Number 2 after swaping:3",
    ]


def test_main_with_negative_numbers(capsys):
    assert main(["--", "-2", "0"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2] == "Number 1 after swaping:0"
    assert lines[3] == "Number 2 after swaping:-2"


def test_main_prompts_when_no_arguments(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n9\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter First Number :" in out
    assert "Enter Second Number :" in out
    assert "Number 1 after swaping:9" in out
    assert "Number 2 after swaping:4" in out


def test_main_rejects_one_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["3"])
    assert excinfo.value.code == 2


def test_main_rejects_non_integer_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["three", "7"])
    assert excinfo.value.code == 2


def test_main_rejects_non_integer_prompt(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n9\n"))
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2