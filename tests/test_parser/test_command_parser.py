from types import SimpleNamespace

import pytest

from gash.parser import (
    CommandBodyLikeParse,
    CommandParser,
    NumberParameter,
    OptionDefinition,
    ParsingFailureReason,
    SingleWordTextParameter,
    TextParameter,
)


@pytest.fixture
def test_command():
    return SimpleNamespace(name="test")


@pytest.fixture
def abc_options():
    return [
        OptionDefinition(short="a"),
        OptionDefinition(short="b"),
        OptionDefinition(short="c"),
        OptionDefinition(long="force"),
        OptionDefinition(long="bar-word"),
    ]


def test_parses_valid_command(test_command):
    result = CommandParser(test_command).parse("test")
    assert result.success
    assert result.command == "test"
    assert result.failure_reason is None


def test_handles_whitespace_prefix(test_command):
    result = CommandParser(test_command).parse(" \ttest")
    assert result.success
    assert result.command == "test"


def test_command_name_ignores_case(test_command):
    result = CommandParser(test_command).parse("TeSt")
    assert result.success
    assert result.command == "test"


def test_handles_options_in_order(test_command, abc_options):
    result = CommandParser(test_command, options=abc_options).parse(
        "test -ab --force -c --bar-word"
    )
    assert result.success
    assert result.options == ["a", "b", "force", "c", "bar-word"]
    assert result.has_option("force")
    assert not result.has_option("d")


def test_fails_on_empty_string(test_command):
    result = CommandParser(test_command).parse("")
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.WRONG_COMMAND


def test_fails_on_different_command(test_command):
    result = CommandParser(test_command).parse("bar")
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.WRONG_COMMAND
    assert result.command is None


def test_fails_on_unrecognized_option(test_command):
    result = CommandParser(test_command, options=[OptionDefinition(short="b")]).parse(
        "test -a"
    )
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.UNRECOGNIZED_OPTION
    assert result.command == "test"


def test_one_bad_letter_rejects_whole_cluster(test_command):
    result = CommandParser(test_command, options=[OptionDefinition(short="a")]).parse(
        "test -az"
    )
    assert result.failure_reason is ParsingFailureReason.UNRECOGNIZED_OPTION
    assert result.options == []


def test_handles_unused_option(test_command):
    result = CommandParser(test_command, options=[OptionDefinition(short="a")]).parse(
        "test"
    )
    assert result.success
    assert result.options == []


def test_option_with_short_and_long_form(test_command):
    parser = CommandParser(
        test_command, options=[OptionDefinition(short="f", long="force")]
    )
    assert parser.parse("test -f").options == ["f"]
    assert parser.parse("test --force").options == ["force"]


def test_text_param(test_command):
    result = CommandParser(test_command, TextParameter()).parse("test foo")
    assert result.success
    assert result.params == ["foo"]


def test_text_param_spans_words(test_command):
    result = CommandParser(test_command, TextParameter()).parse("test  foo bar")
    assert result.success
    assert result.params == ["foo bar"]


def test_text_param_keeps_trailing_blanks(test_command):
    result = CommandParser(test_command, TextParameter()).parse("test foo ")
    assert result.params == ["foo "]


def test_text_param_with_options(test_command):
    result = CommandParser(
        test_command, TextParameter(), [OptionDefinition(short="a")]
    ).parse("test -a bar")
    assert result.success
    assert result.params == ["bar"]
    assert result.options == ["a"]


def test_fails_missing_param(test_command):
    result = CommandParser(test_command, TextParameter()).parse("test")
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM


def test_fails_with_only_option(test_command):
    result = CommandParser(
        test_command, TextParameter(), [OptionDefinition(short="a")]
    ).parse("test -a")
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM


def test_text_param_rejects_number(test_command):
    result = CommandParser(test_command, TextParameter()).parse("test 10")
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM


def test_number_then_text(test_command):
    result = CommandParser(test_command, NumberParameter().then(TextParameter())).parse(
        "test 0.0 foo"
    )
    assert result.success
    assert result.params == ["0", "foo"]


def test_number_then_text_wrong_order(test_command):
    result = CommandParser(test_command, NumberParameter().then(TextParameter())).parse(
        "test foo 0.0"
    )
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM
    assert result.command == "test"


def test_negative_number_is_not_an_option(test_command):
    result = CommandParser(
        test_command, NumberParameter(), [OptionDefinition(short="a")]
    ).parse("test -5")
    assert result.success
    assert result.params == ["-5"]
    assert result.options == []


def test_man_man():
    result = CommandParser("man", SingleWordTextParameter()).parse("man man")
    assert result.success
    assert result.command == "man"
    assert result.params == ["man"]


def test_man_list():
    result = CommandParser("man", SingleWordTextParameter()).parse("man list")
    assert result.params == ["list"]


def test_man_without_topic():
    result = CommandParser("man", SingleWordTextParameter()).parse("man")
    assert not result.success
    assert result.command == "man"


def test_list():
    result = CommandParser("list").parse("list")
    assert result.success
    assert result.command == "list"


def test_parse_is_repeatable(test_command):
    parser = CommandParser(test_command, NumberParameter().then(TextParameter()))
    assert parser.parse("test 1 foo") == parser.parse("test 1 foo")


def test_command_body_like_parse():
    result = CommandBodyLikeParse("  jump over")
    assert result.success
    assert result.command == "jump"


def test_command_body_like_parse_without_word():
    result = CommandBodyLikeParse("42")
    assert not result.success
    assert result.command is None
