"""
Ledger State Module

Owns a single in-memory balance for one session. The balance starts at
INITIAL_BALANCE, is mutated only by credit and debit, and is discarded with
the Ledger instance; nothing is persisted.
"""

from decimal import Decimal
from typing import Optional
import uuid

from .currency import Numeric, round2, format_amount, add_amounts, subtract_amounts
from .logging_config import get_logger, log_action


INITIAL_BALANCE = Decimal('1000.00')


class Ledger:
    """
    Single-balance account ledger.

    Every stored and returned value is rounded to two decimals. Credits are
    unconditional (negative and unbounded amounts are accepted as-is); a debit
    succeeds only when the balance covers the rounded amount.
    """

    def __init__(self, ledger_id: Optional[str] = None):
        self.id = ledger_id or str(uuid.uuid4())
        self._balance = INITIAL_BALANCE
        self.logger = get_logger("account_ledger.ledger")

    def __repr__(self) -> str:
        return f"Ledger({self.id}, balance={self._balance})"

    @property
    def balance(self) -> Decimal:
        return self._balance

    def get_balance(self) -> Decimal:
        return self._balance

    def set_balance(self, amount: Numeric) -> None:
        """Administrative override; the amount is normalized to two decimals"""
        previous = self._balance
        self._balance = round2(amount)
        log_action(self.logger, "info", "Balance overridden",
                   ledger_id=self.id, action="set_balance",
                   details={"previous": format_amount(previous), "balance": format_amount(self._balance)})

    def credit(self, amount: Numeric) -> bool:
        """
        Add amount to the balance.

        Args:
            amount: Amount to credit; sign and magnitude are not validated

        Returns:
            bool: Always True
        """
        amt = round2(amount)
        self._balance = add_amounts(self._balance, amt)
        log_action(self.logger, "info", "Account credited",
                   ledger_id=self.id, action="credit",
                   details={"amount": format_amount(amt), "balance": format_amount(self._balance)})
        return True

    def debit(self, amount: Numeric) -> bool:
        """
        Subtract amount from the balance if sufficient funds.

        Args:
            amount: Amount to debit

        Returns:
            bool: True if debit applied, False if insufficient funds
        """
        amt = round2(amount)
        if self._balance < amt:
            log_action(self.logger, "warning", "Debit rejected: insufficient funds",
                       ledger_id=self.id, action="debit",
                       details={"amount": format_amount(amt), "balance": format_amount(self._balance)})
            return False

        self._balance = subtract_amounts(self._balance, amt)
        log_action(self.logger, "info", "Account debited",
                   ledger_id=self.id, action="debit",
                   details={"amount": format_amount(amt), "balance": format_amount(self._balance)})
        return True

    def reset(self) -> None:
        """Start a fresh session at INITIAL_BALANCE"""
        self._balance = INITIAL_BALANCE
        log_action(self.logger, "info", "Ledger reset",
                   ledger_id=self.id, action="reset",
                   details={"balance": format_amount(self._balance)})
