import pytest

from gash.parser import (
    CommandBody,
    NumberParameter,
    OptionDefinition,
    OptionsParser,
    ParseState,
    ParsingFailureReason,
    SingleWordTextParameter,
    TextParameter,
)
from gash.parser.parser_types import INITIAL_PARSE_STATE


def test_parsers_never_mutate_the_input_state():
    state = ParseState(command="test", position=4)
    result = SingleWordTextParameter().parse("test foo", state)
    assert result.params == ("foo",)
    assert state.params == ()
    assert state.position == 4


def test_index_defaults_to_state_position():
    state = ParseState(position=4)
    assert NumberParameter().parse("test 12", state).params == ("12",)


def test_sequence_short_circuits_on_first_failure():
    parser = NumberParameter().then(SingleWordTextParameter())
    result = parser.parse("test foo", ParseState(position=4))
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM
    assert result.params == ()


def test_or_takes_first_success():
    parser = NumberParameter().or_(SingleWordTextParameter())
    assert parser.parse("test 3", ParseState(position=4)).params == ("3",)
    assert parser.parse("test foo", ParseState(position=4)).params == ("foo",)


def test_or_retries_from_original_position():
    parser = NumberParameter().then(NumberParameter()).or_(SingleWordTextParameter())
    result = parser.parse("test foo", ParseState(position=4))
    assert result.success
    assert result.params == ("foo",)


def test_or_reports_last_failure():
    parser = NumberParameter().or_(SingleWordTextParameter())
    result = parser.parse("test", ParseState(position=4))
    assert not result.success
    assert result.failure_reason is ParsingFailureReason.MISSING_PARAM


def test_optional_returns_prior_state_on_failure():
    state = ParseState(command="test", position=4)
    result = NumberParameter().optional().parse("test foo", state)
    assert result == state


def test_optional_keeps_success():
    result = NumberParameter().optional().parse("test 7", ParseState(position=4))
    assert result.params == ("7",)


def test_repeat_collects_until_failure():
    result = SingleWordTextParameter().repeat().parse(
        "test foo bar 1", ParseState(position=4)
    )
    assert result.success
    assert result.params == ("foo", "bar")
    assert result.position == 12


def test_repeat_with_no_match_keeps_prior_state():
    state = ParseState(position=4)
    assert NumberParameter().repeat().parse("test foo", state) == state


def test_repeat_of_optional_terminates():
    state = ParseState(position=4)
    result = NumberParameter().optional().repeat().parse("test foo", state)
    assert result.success
    assert result.position == 4


def test_command_body_sets_command_only_on_success():
    assert CommandBody("test").parse("test").command == "test"
    failed = CommandBody("test").parse("tests")
    assert not failed.success
    assert failed.command is None
    assert failed.failure_reason is ParsingFailureReason.WRONG_COMMAND


def test_command_body_followed_by_digits():
    result = CommandBody("test").parse("test1")
    assert result.success
    assert result.position == 4


def test_options_parser_optional_and_repeat_are_identity():
    parser = OptionsParser([OptionDefinition(short="a")])
    assert parser.optional() is parser
    assert parser.repeat() is parser


def test_options_parser_without_options():
    state = ParseState(command="test", position=4)
    result = OptionsParser([OptionDefinition(short="a")]).parse("test foo", state)
    assert result.success
    assert result.options == ()
    assert result.position == 4
    assert not result.option_not_found


def test_text_parameter_after_options():
    parser = CommandBody("say").then(OptionsParser([OptionDefinition(long="loud")]))
    parser = parser.then(TextParameter())
    result = parser.parse("say --loud hello there", INITIAL_PARSE_STATE, 0)
    assert result.success
    assert result.options == ("loud",)
    assert result.params == ("hello there",)


def test_option_definition_requires_a_form():
    with pytest.raises(ValueError, match="short or a long"):
        OptionDefinition()


def test_option_definition_short_is_one_letter():
    with pytest.raises(ValueError):
        OptionDefinition(short="ab")
