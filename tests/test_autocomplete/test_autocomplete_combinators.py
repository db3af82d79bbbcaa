from gash.parser import (
    AutoCompleteNumber,
    AutoCompleteSingleWordTextParam,
    AutoCompleteState,
    AutoCompleteTextParam,
    AutoCompleteType,
    CommandBodyAutoCompleter,
    OptionsAutoCompleter,
)
from gash.parser.autocompleters import common_prefix


def test_common_prefix():
    assert common_prefix(["fooBar", "fooFoo"]) == "foo"
    assert common_prefix(["sword"]) == "sword"
    assert common_prefix(["abc", "xyz"]) == ""
    assert common_prefix([]) == ""


def test_common_prefix_ignores_case():
    assert common_prefix(["Potion", "poTato"]) == "Pot"


def test_common_prefix_stops_at_shortest():
    assert common_prefix(["ab", "abc"]) == "ab"


def test_sequence_stops_unless_already_matching():
    completer = CommandBodyAutoCompleter("test").then(AutoCompleteNumber())
    result = completer.autocomplete("te")
    assert result.type is AutoCompleteType.SINGLE_MATCH_FOUND
    assert result.fixed_value == "test"


def test_or_falls_through_on_not_matching():
    completer = AutoCompleteNumber().or_(AutoCompleteSingleWordTextParam(["sword"]))
    state = AutoCompleteState(fixed_value="buy", position=3)
    result = completer.autocomplete("buy sw", state)
    assert result.type is AutoCompleteType.SINGLE_MATCH_FOUND
    assert result.fixed_value == "buy sword"


def test_or_keeps_first_completion():
    completer = AutoCompleteSingleWordTextParam(["shield"]).or_(
        AutoCompleteSingleWordTextParam(["shovel"])
    )
    state = AutoCompleteState(fixed_value="buy", position=3)
    result = completer.autocomplete("buy sh", state)
    assert result.fixed_value == "buy shield"


def test_state_is_not_mutated():
    state = AutoCompleteState(fixed_value="buy", position=3)
    AutoCompleteTextParam(["sword"]).autocomplete("buy sword", state)
    assert state.fixed_value == "buy"
    assert state.position == 3


def test_multiple_matches_equal_to_typed_text():
    completer = AutoCompleteTextParam(["foo", "fooBar"])
    state = AutoCompleteState(fixed_value="test", position=4)
    result = completer.autocomplete("test fo", state)
    assert result.type is AutoCompleteType.MULTIPLE_MATCHES_FOUND
    assert result.fixed_value == "test foo"


def test_exact_candidate_wins_over_longer_ones():
    completer = AutoCompleteTextParam(["foo", "fooBar"])
    state = AutoCompleteState(fixed_value="test", position=4)
    result = completer.autocomplete("test foo", state)
    assert result.type is AutoCompleteType.ALREADY_MATCHING


def test_options_are_accepted_without_validation():
    state = AutoCompleteState(fixed_value="test", position=4)
    result = OptionsAutoCompleter().autocomplete("test -xyz --anything", state)
    assert result.type is AutoCompleteType.ALREADY_MATCHING
    assert result.fixed_value == "test -xyz --anything"
    assert not result.option_not_found


def test_options_absent():
    state = AutoCompleteState(fixed_value="test", position=4)
    result = OptionsAutoCompleter().autocomplete("test foo", state)
    assert result.type is AutoCompleteType.ALREADY_MATCHING
    assert result.fixed_value == "test"
    assert result.position == 4
