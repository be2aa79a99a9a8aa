import io

import pytest

from orderdesk import util


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_split_words():
    assert util.split("BUY 100 IBM", " ") == ["BUY", "100", "IBM"]


def test_split_default_delimiters():
    assert util.split("BUY\t100\nIBM") == ["BUY", "100", "IBM"]


def test_split_keeps_empty_tokens_between_delimiters():
    assert util.split("a  b", " ") == ["a", "", "b"]
    assert util.split(" a", " ") == ["", "a"]


def test_split_drops_trailing_delimiter_and_empty_input():
    assert util.split("a ", " ") == ["a"]
    assert util.split("", " ") == []


def test_split_join_round_trip():
    words = ["SELL", "200", "MSFT", "1252"]
    assert util.split(" ".join(words), " ") == words


@pytest.mark.parametrize("text", ["0", "1234", "4294967295", "  77", "+5"])
def test_to_uint32_valid(text):
    assert util.to_uint32(text) == int(text)


def test_to_uint32_empty_is_zero():
    assert util.to_uint32("") == 0


@pytest.mark.parametrize("text", ["12x", "abc", "4294967296", "-1", "1 ", " "])
def test_to_uint32_invalid(text):
    with pytest.raises(ValueError):
        util.to_uint32(text)


@pytest.mark.parametrize("text", ["-12", "0", "2147483647", "-2147483648"])
def test_to_int32_valid(text):
    assert util.to_int32(text) == int(text)


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "1.5", "x"])
def test_to_int32_invalid(text):
    with pytest.raises(ValueError):
        util.to_int32(text)


def test_string_to_price():
    assert util.string_to_price("MKT") == util.MARKET_ORDER_PRICE
    assert util.string_to_price("MARKET") == util.MARKET_ORDER_PRICE
    assert util.string_to_price("1250") == 1250
    with pytest.raises(ValueError):
        util.string_to_price("market price")


def test_prompt_for_string_uppercases(monkeypatch, capsys):
    feed(monkeypatch, "buy ibm\n")
    assert util.prompt_for_string("Side") == "BUY IBM"
    assert capsys.readouterr().out == "\nSide: "


def test_prompt_for_string_preserves_case(monkeypatch):
    feed(monkeypatch, "Mixed Case\n")
    assert util.prompt_for_string("Name", False) == "Mixed Case"


def test_prompt_for_string_at_end_of_input(monkeypatch):
    feed(monkeypatch, "")
    assert util.prompt_for_string("Name") == ""


def test_prompt_for_price(monkeypatch):
    feed(monkeypatch, "mkt\n1251\n")
    assert util.prompt_for_price("Price") == util.MARKET_ORDER_PRICE
    assert util.prompt_for_price("Price") == 1251


def test_prompt_for_numbers(monkeypatch):
    feed(monkeypatch, "300\n-75\n")
    assert util.prompt_for_uint32("Quantity") == 300
    assert util.prompt_for_int32("Delta") == -75


def test_prompt_for_uint32_invalid(monkeypatch):
    feed(monkeypatch, "lots\n")
    with pytest.raises(ValueError):
        util.prompt_for_uint32("Quantity")


@pytest.mark.parametrize(
    "answer, expected",
    [("y", True), ("YES", True), ("t", True), ("true", True),
     ("n", False), ("No", False), ("f", False), ("FALSE", False)],
)
def test_prompt_for_yes_no(monkeypatch, answer, expected):
    feed(monkeypatch, answer + "\n")
    assert util.prompt_for_yes_no("AON") is expected


def test_prompt_for_yes_no_repeats_until_valid(monkeypatch, capsys):
    feed(monkeypatch, "maybe\n\nyes\n")
    assert util.prompt_for_yes_no("IOC") is True
    assert capsys.readouterr().out.count("IOC: ") == 3


def test_prompt_for_yes_no_end_of_input(monkeypatch):
    feed(monkeypatch, "perhaps\n")
    with pytest.raises(EOFError):
        util.prompt_for_yes_no("AON")


def test_trims():
    text = " \t hello world \r\n"
    assert util.ltrimmed(text) == "hello world \r\n"
    assert util.rtrimmed(text) == " \t hello world"
    assert util.trimmed(text) == "hello world"


def test_trimmed_is_idempotent():
    once = util.trimmed("\v  value \f")
    assert util.trimmed(once) == once
    assert util.ltrimmed(util.rtrimmed("\v  value \f")) == once