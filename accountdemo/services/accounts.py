# =============================================================================
# File: accountdemo/services/accounts.py
# Purpose: Managing accounts (business layer over the repository).
# =============================================================================
from __future__ import annotations

from typing import List, Sequence

from accountdemo.models import Account
from accountdemo.repository import AccountRepository


class AccountService:
    """Saves and retrieves accounts.

    Calls straight through to the repository. Business rules go here, storage
    concerns stay in the repository. Store errors are not caught.
    """

    def __init__(self, repository: AccountRepository):
        self.repository = repository

    def total_accounts(self) -> int:
        return self.repository.count()

    def save(self, accounts: Sequence[Account]) -> None:
        self.repository.save(accounts)

    def find_all(self) -> List[Account]:
        return self.repository.find_all()

    def delete_all(self) -> int:
        return self.repository.delete_all()

    def find(self, match: str) -> List[Account]:
        """Accounts whose name contains ``match``, ignoring case."""
        return self.repository.find_by_name_like(match)
