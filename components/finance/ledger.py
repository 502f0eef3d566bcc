"""General cash book (Buku Kas Umum) with running balance."""

from typing import Iterable, Iterator, List

from components.core.schemas import FlowType
from components.finance.schemas import LedgerEntry
from components.transaction.schemas import Transaction


def sort_chronologically(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Ascending by date; same-day entries keep their original order."""
    return sorted(transactions, key=lambda transaction: transaction.transaction_date)


class CashBook:
    """Ordered transactions with a cumulative signed balance.

    Iterating yields a ``LedgerEntry`` per transaction. Each iteration starts
    again from a zero balance, so the book can be walked any number of times.
    """

    def __init__(self, transactions: Iterable[Transaction]):
        self.transactions = sort_chronologically(transactions)

    def __iter__(self) -> Iterator[LedgerEntry]:
        balance = 0.0
        for transaction in self.transactions:
            amount = transaction.actual_amount
            if transaction.type == FlowType.INCOME:
                balance += amount
                yield LedgerEntry(transaction=transaction, income=amount, running_balance=balance)
            else:
                balance -= amount
                yield LedgerEntry(transaction=transaction, expense=amount, running_balance=balance)

    def __len__(self) -> int:
        return len(self.transactions)

    @property
    def entries(self) -> List[LedgerEntry]:
        return list(self)

    @property
    def total_income(self) -> float:
        return sum(t.actual_amount for t in self.transactions if t.type == FlowType.INCOME)

    @property
    def total_expense(self) -> float:
        return sum(t.actual_amount for t in self.transactions if t.type == FlowType.EXPENSE)

    @property
    def final_balance(self) -> float:
        """Balance after the last entry, 0 for an empty book."""
        balance = 0.0
        for entry in self:
            balance = entry.running_balance
        return balance


def compute_ledger(transactions: Iterable[Transaction]) -> CashBook:
    return CashBook(transactions)
