# =============================================================================
# File: accountdemo/demo.py
# Purpose: Startup demo: create table, populate it, check the row count.
# =============================================================================
from __future__ import annotations

import enum
import logging
from typing import Optional, Sequence

from .models import Account
from .seed import AccountData, load_seed_accounts
from .services import AccountService

log = logging.getLogger(__name__)

ACCOUNTS_ERROR = "Expected %d accounts, but received %d"
ACCOUNT_INFO = "%-9s (ID = %2s) - balance %7s"


class AccountsVerificationError(RuntimeError):
    """The Accounts table does not hold the number of rows just created."""

    def __init__(self, expected: int, actual: int):
        super().__init__(ACCOUNTS_ERROR % (expected, actual))
        self.expected = expected
        self.actual = actual


class DemoState(enum.Enum):
    CREATED = "created"
    TABLE_READY = "table_ready"
    POPULATED = "populated"
    VERIFIED = "verified"


class DemoRunner:
    """Runs the three demo steps, in order, exactly once."""

    def __init__(self, service: AccountService, seed: Optional[Sequence[AccountData]] = None):
        self.service = service
        self.seed = list(seed) if seed is not None else load_seed_accounts()
        self.state = DemoState.CREATED

    @property
    def accounts_expected(self) -> int:
        return len(self.seed)

    def _require(self, expected: DemoState) -> None:
        if self.state is not expected:
            raise RuntimeError(
                f"Demo is {self.state.value}, expected {expected.value}"
            )

    def create_account_table(self) -> None:
        self._require(DemoState.CREATED)
        # The Alembic migrations own the schema, the demo only needs it empty
        removed = self.service.delete_all()
        if removed > 0:
            log.info("Removed %s accounts left by a previous run", removed)
        self.state = DemoState.TABLE_READY

    def populate_demo(self) -> None:
        self._require(DemoState.TABLE_READY)

        accounts = [Account(data.name, data.balance) for data in self.seed]
        self.service.save(accounts)
        self.state = DemoState.POPULATED

    def display_accounts(self) -> None:
        self._require(DemoState.POPULATED)

        accounts_found = self.service.total_accounts()
        log.info("Database contains %s accounts", accounts_found)

        if log.isEnabledFor(logging.DEBUG):
            for account in self.service.find_all():
                log.debug(ACCOUNT_INFO, account.name, account.id, account.balance)

        if accounts_found != self.accounts_expected:
            raise AccountsVerificationError(self.accounts_expected, accounts_found)

        self.state = DemoState.VERIFIED

    def run_demo(self) -> None:
        log.info("Running accounts demo")
        self.create_account_table()
        self.populate_demo()
        self.display_accounts()
