"""shop_actions.py"""

from gash.parser.parser_types import ParseResult


def buy(result: ParseResult) -> str:
    amount, item = result.params
    print(f"You bought {amount} {item}(s).")
    return item


def haggle(result: ParseResult) -> None:
    print("The shopkeeper sighs." if result.options else "The shopkeeper shrugs.")
