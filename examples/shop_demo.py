import asyncio

from gash import Gash, Keyword
from gash.parser import (
    AutoCompleteKeywords,
    AutoCompleteNumber,
    AutoCompleteSingleWordTextParam,
    NumberParameter,
    OptionDefinition,
    SingleWordTextParameter,
    TextParameter,
)
from gash.parser.parser_types import ParseResult
from gash.utils import setup_logging

setup_logging()

inventory: dict[str, int] = {}


def buy(result: ParseResult) -> None:
    amount, item = result.params
    inventory[item] = inventory.get(item, 0) + int(float(amount))
    suffix = " without haggling" if result.has_option("force") else ""
    print(f"You bought {amount} {item}(s){suffix}.")


async def inspect(result: ParseResult) -> None:
    await asyncio.sleep(0.1)
    print(f"You look closely at the {result.params[0].strip()}.")


gash = Gash(
    "🛒 Gash Shop",
    welcome_message="Welcome to the shop. Type [command]list[/command] to begin.",
    exit_message="Come back soon!",
)
gash.register_keyword(Keyword("gold", "The currency of the realm."))
gash.register_keyword(Keyword("reputation", "How much the shopkeeper likes you."))

gash.add_command(
    "buy",
    buy,
    params=NumberParameter().then(SingleWordTextParameter()),
    completion=AutoCompleteNumber().then(
        AutoCompleteSingleWordTextParam(["sword", "shield", "potion"])
    ),
    options=[OptionDefinition(short="f", long="force")],
    help_text="Buy an amount of an item: buy 2 potion",
)
gash.add_command(
    "inspect",
    inspect,
    params=TextParameter(),
    completion=AutoCompleteKeywords(gash.registry.keywords),
    help_text="Look at something in the shop.",
)

if __name__ == "__main__":
    asyncio.run(gash.menu())
