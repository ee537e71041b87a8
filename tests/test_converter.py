from __future__ import annotations

import pytest

from strarray import (
    ConverterConfig,
    DelimitedStringArrayConverter,
    InvalidInputError,
    StringArrayEditor,
    TextConverter,
)


@pytest.fixture()
def converter() -> DelimitedStringArrayConverter:
    return DelimitedStringArrayConverter()


def test_parse_trims_by_default(converter: DelimitedStringArrayConverter) -> None:
    assert converter.parse("a, b ,c") == ["a", "b", "c"]


def test_parse_without_trimming() -> None:
    converter = DelimitedStringArrayConverter(trim_values=False)
    assert converter.parse("a, b ,c") == ["a", " b ", "c"]


def test_parse_deletes_characters_before_trimming() -> None:
    converter = DelimitedStringArrayConverter(chars_to_delete="\r\n")
    assert converter.parse("a\r\n,b\r\n") == ["a", "b"]
    assert converter.parse("x \n, y") == ["x", "y"]


def test_parse_empty_text(converter: DelimitedStringArrayConverter) -> None:
    assert converter.parse("") == []
    assert DelimitedStringArrayConverter(empty_array_as_null=True).parse("") is None


def test_parse_trailing_and_adjacent_separators(converter: DelimitedStringArrayConverter) -> None:
    assert converter.parse("a,b,") == ["a", "b", ""]
    assert converter.parse("a,,b") == ["a", "", "b"]
    assert converter.parse(",") == ["", ""]


def test_parse_keeps_empty_tokens_when_null_substitution_enabled() -> None:
    converter = DelimitedStringArrayConverter(empty_array_as_null=True)
    assert converter.parse("a,,b") == ["a", "", "b"]
    assert converter.parse(" ") == [""]


def test_parse_chars_to_delete_can_empty_a_token() -> None:
    converter = DelimitedStringArrayConverter(chars_to_delete="x")
    assert converter.parse("xx,a") == ["", "a"]


def test_parse_custom_separator() -> None:
    converter = DelimitedStringArrayConverter(separator=";")
    assert converter.parse("a,b; c") == ["a,b", "c"]


def test_parse_rejects_non_string(converter: DelimitedStringArrayConverter) -> None:
    with pytest.raises(InvalidInputError):
        converter.parse(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        converter.parse(b"a,b")  # type: ignore[arg-type]


def test_empty_separator_rejected_at_construction() -> None:
    with pytest.raises(InvalidInputError, match="separator"):
        DelimitedStringArrayConverter(separator="")


def test_unknown_option_rejected() -> None:
    with pytest.raises(InvalidInputError):
        DelimitedStringArrayConverter(delimiter=";")


def test_config_and_options_are_exclusive() -> None:
    with pytest.raises(InvalidInputError):
        DelimitedStringArrayConverter(ConverterConfig(), separator=";")


def test_format_joins_with_separator(converter: DelimitedStringArrayConverter) -> None:
    assert converter.format(["x", "y", "z"]) == "x,y,z"
    assert DelimitedStringArrayConverter(separator=" | ").format(("x", "y")) == "x | y"


def test_format_null_and_empty(converter: DelimitedStringArrayConverter) -> None:
    assert converter.format(None) == ""
    assert converter.format([]) == ""


def test_format_stringifies_elements(converter: DelimitedStringArrayConverter) -> None:
    assert converter.format([1, 2.5, True]) == "1,2.5,True"


def test_format_rejects_non_array(converter: DelimitedStringArrayConverter) -> None:
    with pytest.raises(InvalidInputError):
        converter.format("a,b")
    with pytest.raises(InvalidInputError):
        converter.format(42)


@pytest.mark.parametrize(
    "tokens",
    [
        ["a"],
        ["a", "b", "c"],
        ["a", "", "b"],
        ["dup", "dup"],
    ],
)
def test_round_trip(converter: DelimitedStringArrayConverter, tokens: list[str]) -> None:
    assert converter.parse(converter.format(tokens)) == tokens


def test_converter_satisfies_text_converter_protocol(converter: DelimitedStringArrayConverter) -> None:
    assert isinstance(converter, TextConverter)


def test_editor_starts_unset() -> None:
    editor = StringArrayEditor()
    assert editor.get_value() is None
    assert editor.format() == ""


def test_editor_parse_stores_value() -> None:
    editor = StringArrayEditor(separator=";")
    assert editor.parse("a; b") is None
    assert editor.get_value() == ["a", "b"]
    assert editor.format() == "a;b"
    # format does not change state
    assert editor.get_value() == ["a", "b"]


def test_editor_parse_empty_as_null() -> None:
    editor = StringArrayEditor(empty_array_as_null=True)
    editor.set_value(["stale"])
    editor.parse("")
    assert editor.value is None


def test_editor_set_value_copies_sequence() -> None:
    editor = StringArrayEditor()
    source = ["x", "y"]
    editor.set_value(source)
    source.append("z")
    assert editor.get_value() == ["x", "y"]
    editor.value = ("p", "q")
    assert editor.format() == "p,q"


def test_editor_set_value_rejects_non_array() -> None:
    editor = StringArrayEditor()
    with pytest.raises(InvalidInputError):
        editor.set_value("a,b")


def test_editor_shares_converter() -> None:
    converter = DelimitedStringArrayConverter(separator="|")
    first, second = StringArrayEditor(converter), StringArrayEditor(converter)
    first.parse("a|b")
    second.parse("c")
    assert first.get_value() == ["a", "b"]
    assert second.get_value() == ["c"]
