"""
Console Driver Module

Menu-driven read-eval-print loop over a Ledger. Input and output are a pair
of line-oriented callables so tests can script a session.
"""

from decimal import Decimal
from enum import Enum
from typing import Callable, Optional
import re

from .currency import format_amount, parse_amount
from .ledger import Ledger
from .logging_config import get_logger


MENU_RULE = "--------------------------------"
MENU_LINES = (
    MENU_RULE,
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    MENU_RULE,
)

CHOICE_PROMPT = "Enter your choice (1-4): "
CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "
INVALID_CHOICE = "Invalid choice, please select 1-4."
INSUFFICIENT_FUNDS = "Insufficient funds for this debit."
FAREWELL = "Exiting the program. Goodbye!"

VIEW_BALANCE, CREDIT_ACCOUNT, DEBIT_ACCOUNT, EXIT = 1, 2, 3, 4

_INTEGER_PREFIX = re.compile(r'^[+-]?\d+')


class DriverState(Enum):
    """Console driver states"""
    PROMPTING = "prompting"
    DISPATCHING = "dispatching"
    EXITED = "exited"


def parse_choice(raw: Optional[str]) -> Optional[int]:
    """Leading integer of a menu line ("2abc" -> 2), or None"""
    if raw is None:
        return None
    match = _INTEGER_PREFIX.match(raw.strip())
    return int(match.group(0)) if match else None


class ConsoleDriver:
    """Runs the account menu against one ledger until Exit is chosen"""

    def __init__(self, ledger: Ledger,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self.ledger = ledger
        self._input = input_func or input
        self._output = output_func or print
        self.state = DriverState.PROMPTING
        self.logger = get_logger("account_ledger.console")

    def display_menu(self) -> None:
        for line in MENU_LINES:
            self._output(line)

    def read_choice(self) -> Optional[int]:
        return parse_choice(self._input(CHOICE_PROMPT))

    def read_amount(self, prompt: str) -> Decimal:
        return parse_amount(self._input(prompt))

    def view_balance(self) -> None:
        self._output(f"Current balance: {format_amount(self.ledger.get_balance())}")

    def credit_account(self) -> bool:
        amount = self.read_amount(CREDIT_PROMPT)
        ok = self.ledger.credit(amount)
        self._output(f"Amount credited. New balance: {format_amount(self.ledger.balance)}")
        return ok

    def debit_account(self) -> bool:
        amount = self.read_amount(DEBIT_PROMPT)
        ok = self.ledger.debit(amount)
        if ok:
            self._output(f"Amount debited. New balance: {format_amount(self.ledger.balance)}")
        else:
            self._output(INSUFFICIENT_FUNDS)
        return ok

    def exit_session(self) -> None:
        self.state = DriverState.EXITED
        self._output(FAREWELL)

    def step(self) -> DriverState:
        """Run one prompt/dispatch cycle and return the resulting state"""
        if self.state is DriverState.EXITED:
            return self.state

        self.state = DriverState.PROMPTING
        self.display_menu()
        try:
            choice = self.read_choice()
            self.state = DriverState.DISPATCHING
            self.logger.debug(f"Dispatching menu choice {choice}")

            if choice == VIEW_BALANCE:
                self.view_balance()
            elif choice == CREDIT_ACCOUNT:
                self.credit_account()
            elif choice == DEBIT_ACCOUNT:
                self.debit_account()
            elif choice == EXIT:
                self.exit_session()
                return self.state
            else:
                self._output(INVALID_CHOICE)
        except (EOFError, KeyboardInterrupt):
            # Closed input ends the session like choosing Exit
            self._output("")
            self.logger.info("Input closed; ending session")
            self.exit_session()
            return self.state

        self.state = DriverState.PROMPTING
        return self.state

    def run(self) -> int:
        """Loop until Exit is chosen; returns the process exit code"""
        while self.state is not DriverState.EXITED:
            self.step()
        return 0
