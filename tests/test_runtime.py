import io

import pytest

from calcc.runtime import calc_read, calc_write


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_write_prints_result(capsys):
    calc_write(42)
    assert capsys.readouterr().out == "The result is 42\n"


def test_read_prompts_and_returns_value(monkeypatch, capsys):
    feed(monkeypatch, "17\n")
    assert calc_read("x") == 17
    assert capsys.readouterr().out == "Enter a value for x: "


def test_read_accepts_sign_and_leading_space(monkeypatch):
    feed(monkeypatch, "  -5 trailing\n")
    assert calc_read("y") == -5


@pytest.mark.parametrize("value", [0, 1, -123, 2147483647])
def test_read_round_trip(monkeypatch, value):
    feed(monkeypatch, f"{value}\n")
    assert calc_read("v") == value


def test_read_only_uses_first_line(monkeypatch):
    feed(monkeypatch, "3\n4\n")
    assert calc_read("a") == 3
    assert calc_read("b") == 4


def test_empty_line_is_invalid(monkeypatch, capsys):
    feed(monkeypatch, "\n")
    with pytest.raises(SystemExit) as excinfo:
        calc_read("x")
    assert excinfo.value.code == 1
    assert capsys.readouterr().out.endswith("Value \n is invalid\n")


@pytest.mark.parametrize("text", ["abc\n", "", "   \n"])
def test_non_number_is_invalid(monkeypatch, text):
    feed(monkeypatch, text)
    with pytest.raises(SystemExit) as excinfo:
        calc_read("x")
    assert excinfo.value.code == 1