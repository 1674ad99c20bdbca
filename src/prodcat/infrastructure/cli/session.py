"""The interactive catalog session: read, validate, act, display.

The session is a small state machine. Each step returns the state to
move to next and ``run`` drives the steps in a loop, so a session of
any length keeps a constant call depth.

    ADDING --quit--> DISPLAYING --P--> ADDING
                                --S--> SEARCHING --(menu)--> ADDING / SEARCHING / TERMINATED
                                --Q--> TERMINATED
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import Callable

from prodcat.application.add_product import AddProductHandler
from prodcat.application.dto import ProductLineDTO
from prodcat.application.list_products import ListProductsHandler
from prodcat.application.search_products import SearchProductsHandler
from prodcat.domain.exceptions import (
    DomainException,
    EmptyInputError,
    InvalidCommandError,
    InvalidPriceError,
)
from prodcat.domain.model.command import QUIT, Command, QuitSignal, is_quit
from prodcat.domain.model.value_objects import is_valid_price
from prodcat.infrastructure.cli.console import Console
from prodcat.infrastructure.cli.line_source import LineSource

logger = logging.getLogger(__name__)

ADD_BANNER = 'To enter a new product - follow the steps | To quit - enter: "Q"'
MENU = (
    f'To enter a new product - enter: "{Command.ADD_PRODUCT.value}" | '
    f'To search for a product - enter: "{Command.SEARCH.value}" | '
    f'To quit - enter: "{Command.QUIT.value}"'
)
CATEGORY_PROMPT = "Enter a Category: "
NAME_PROMPT = "Enter a Product Name: "
PRICE_PROMPT = "Enter a Price: "
ADDED_MESSAGE = "The product was successfully added!"
TABLE_HEADER = f"{'Category':<20} {'Product':<20} {'Price':>12}"


class SessionState(Enum):
    ADDING = "ADDING"
    DISPLAYING = "DISPLAYING"
    SEARCHING = "SEARCHING"
    TERMINATED = "TERMINATED"


_NEXT_STATE = {
    Command.ADD_PRODUCT: SessionState.ADDING,
    Command.SEARCH: SessionState.SEARCHING,
    Command.QUIT: SessionState.TERMINATED,
}


class CatalogSession:

    def __init__(
        self,
        add_product: AddProductHandler,
        list_products: ListProductsHandler,
        search_products: SearchProductsHandler,
        line_source: LineSource,
        console: Console,
    ) -> None:
        self._add_product = add_product
        self._list_products = list_products
        self._search_products = search_products
        self._line_source = line_source
        self._console = console

    def run(self, state: SessionState = SessionState.ADDING) -> None:
        """Drive the session until the user quits or input runs out."""
        steps: dict[SessionState, Callable[[], SessionState]] = {
            SessionState.ADDING: self.add_product_flow,
            SessionState.DISPLAYING: self.display_products,
            SessionState.SEARCHING: self.search_product,
        }
        logger.info("Catalog session started")
        while state is not SessionState.TERMINATED:
            logger.debug("Session state -> %s", state.value)
            state = steps[state]()
        logger.info("Catalog session ended")

    # --- Input ----------------------------------------------------------------

    def read_line(self, prompt: str) -> str | QuitSignal:
        """Prompt until a non-blank answer arrives.

        Returns the trimmed text, or QUIT when the answer is "Q" (any
        case) or input is exhausted.
        """
        while True:
            self._console.prompt(prompt)
            raw = self._line_source.read_line()
            if raw is None:
                return QUIT
            text = raw.strip()
            if not text:
                self._report(EmptyInputError())
                continue
            if is_quit(text):
                return QUIT
            return text

    def read_price(self, prompt: str) -> Decimal | QuitSignal:
        """Prompt until a positive decimal arrives, with no retry limit."""
        while True:
            self._console.prompt(prompt)
            raw = self._line_source.read_line()
            if raw is None:
                return QUIT
            text = raw.strip()
            if is_quit(text):
                return QUIT
            valid, value = is_valid_price(text)
            if valid:
                return value
            self._report(InvalidPriceError())

    def handle_choice(self) -> SessionState:
        """Read menu answers until one is a known command."""
        while True:
            raw = self._line_source.read_line()
            if raw is None:
                return SessionState.TERMINATED
            command = Command.parse(raw)
            if command is None:
                self._report(InvalidCommandError())
                continue
            logger.debug("Menu choice %s", command.name)
            return _NEXT_STATE[command]

    # --- Steps ----------------------------------------------------------------

    def add_product_flow(self) -> SessionState:
        """Collect products until the user quits, then show the catalog."""
        while True:
            self._console.clear()
            self._console.heading(ADD_BANNER)

            category = self.read_line(CATEGORY_PROMPT)
            if category is QUIT:
                return SessionState.DISPLAYING
            name = self.read_line(NAME_PROMPT)
            if name is QUIT:
                return SessionState.DISPLAYING
            price = self.read_price(PRICE_PROMPT)
            if price is QUIT:
                return SessionState.DISPLAYING

            try:
                self._add_product.handle(category=category, name=name, price=price)
            except DomainException as exc:
                self._report(exc)
                continue
            self._console.success(ADDED_MESSAGE)

    def display_products(self) -> SessionState:
        listing = self._list_products.handle()

        self._console.clear()
        self._console.heading(TABLE_HEADER)
        for line in listing.lines:
            self._console.echo(_format_line(line))
        self._console.echo()
        self._console.echo(f"Total amount: {listing.total}")

        self._show_menu()
        return self.handle_choice()

    def search_product(self) -> SessionState:
        term = self.read_line(NAME_PROMPT)
        if term is QUIT:
            self._show_menu()
            return self.handle_choice()

        matches = self._search_products.handle(term)

        self._console.clear()
        if not matches:
            self._console.echo(f"No products found matching '{term}'.")
        else:
            self._console.heading(TABLE_HEADER)
            for line in matches:
                self._console.highlight(_format_line(line))

        self._show_menu()
        return self.handle_choice()

    # --- Helpers --------------------------------------------------------------

    def _show_menu(self) -> None:
        self._console.echo()
        self._console.echo(MENU)

    def _report(self, exc: DomainException) -> None:
        logger.debug("Rejected input: %s", type(exc).__name__)
        self._console.error(str(exc))


def _format_line(line: ProductLineDTO) -> str:
    return f"{line.category:<20} {line.name:<20} {line.price:>12}"
