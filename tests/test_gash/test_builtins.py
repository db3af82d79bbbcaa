import pytest
from rich.console import Console

from gash import Gash, Keyword
from gash.parser import AutoCompleteType
from gash.themes import get_gash_theme


@pytest.fixture
def console():
    return Console(record=True, width=120, theme=get_gash_theme())


@pytest.fixture
def gash(console):
    gash = Gash("Test", console=console)
    gash.add_command("look", help_text="Look around the room.")
    gash.add_command("secret", hidden=True)
    gash.register_keyword(Keyword("gold", "The currency of the realm."))
    return gash


@pytest.mark.asyncio
async def test_list_shows_available_commands(gash, console):
    result = await gash.run_line("list")
    assert result.success
    output = console.export_text()
    assert "Currently available commands follow." in output
    for name in ("list", "man", "look"):
        assert f"    {name}" in output
    assert "secret" not in output


@pytest.mark.asyncio
async def test_man_shows_command_help(gash, console):
    await gash.run_line("man look")
    output = console.export_text()
    assert "look" in output
    assert "Look around the room." in output


@pytest.mark.asyncio
async def test_man_ignores_case_and_trailing_blanks(gash, console):
    await gash.run_line("man LOOK  ")
    assert "Look around the room." in console.export_text()


@pytest.mark.asyncio
async def test_man_shows_keyword_help(gash, console):
    await gash.run_line("man gold")
    assert "The currency of the realm." in console.export_text()


@pytest.mark.asyncio
async def test_man_unknown_topic(gash, console):
    await gash.run_line("man dragons")
    assert (
        "Unrecognized command or keyword 'dragons', cannot display manual page."
        in console.export_text()
    )


@pytest.mark.asyncio
async def test_man_without_help_text(gash, console):
    await gash.run_line("man secret")
    assert "No manual entry." in console.export_text()


def test_man_completes_commands_and_keywords(gash):
    assert gash.try_autocomplete("man lo").fixed_value == "man look"
    assert gash.try_autocomplete("man go").fixed_value == "man gold"


def test_man_completes_later_registrations(gash):
    gash.register_keyword(Keyword("reputation"))
    result = gash.try_autocomplete("man rep")
    assert result.type is AutoCompleteType.SINGLE_MATCH_FOUND
    assert result.fixed_value == "man reputation"


def test_man_completion_is_ambiguous_between_candidates(gash):
    gash.add_command("lock")
    result = gash.try_autocomplete("man lo")
    assert result.type is AutoCompleteType.MULTIPLE_MATCHES_FOUND
    assert result.fixed_value == "man lo"
