import pytest

from language_resources.entries import add_unique, parse_alias_line, parse_number_line
from language_resources.errors import ResourceFormatError


def test_add_unique_preserves_order_and_rejects_repeats():
    mapping = {}
    assert add_unique(mapping, "copy", "coffee")
    assert add_unique(mapping, "copy", "cuppy")
    assert not add_unique(mapping, "copy", "coffee")
    assert mapping == {"copy": ["coffee", "cuppy"]}


def test_add_unique_is_scoped_per_key():
    mapping = {}
    assert add_unique(mapping, 1, "one")
    assert add_unique(mapping, 2, "one")
    assert mapping == {1: ["one"], 2: ["one"]}


@pytest.mark.parametrize(
    "line",
    ['"coffee" = "copy"', "coffee = copy", ' "coffee"="copy" ', 'coffee = "copy"'],
)
def test_alias_quotes_are_optional(line):
    entry = parse_alias_line(line)
    assert entry.alias == "coffee"
    assert entry.canonical == "copy"
    assert not entry.is_multiword


def test_only_one_layer_of_quotes_is_removed():
    entry = parse_alias_line('""quoted"" = word')
    assert entry.alias == '"quoted"'


def test_alias_with_spaces_becomes_phrase():
    entry = parse_alias_line('"turn  up" = "increase"')
    assert entry.is_multiword
    assert entry.phrase == ("turn", "up")
    assert entry.canonical == "increase"


@pytest.mark.parametrize("line", ["coffee", "a = b = c", '"" = copy', "coffee = "])
def test_malformed_alias_lines(line):
    with pytest.raises(ResourceFormatError) as excinfo:
        parse_alias_line(line)
    assert excinfo.value.line == line


def test_number_line():
    entry = parse_number_line("third = 3", "numbers.ordinals")
    assert entry.alias == "third"
    assert entry.value == 3


def test_number_line_accepts_sign():
    assert parse_number_line("last = -1").value == -1


@pytest.mark.parametrize("line", ["third = three", "third = 3.0", "third = 1_000", "third = 3 = 4", "= 3"])
def test_malformed_number_lines(line):
    with pytest.raises(ResourceFormatError) as excinfo:
        parse_number_line(line, "numbers.plain")
    assert "numbers.plain" in str(excinfo.value)
