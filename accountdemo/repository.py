# =============================================================================
# File: accountdemo/repository.py
# Purpose: Storing and retrieving accounts (SQLAlchemy implementation).
# =============================================================================
from __future__ import annotations

from typing import List, Protocol, Sequence

from sqlalchemy import delete, func, literal, select
from sqlalchemy.orm import sessionmaker

from .models import Account


class AccountRepository(Protocol):
    """Storage for accounts, typically a relational database."""

    def count(self) -> int: ...

    def save(self, accounts: Sequence[Account]) -> None: ...

    def find_all(self) -> List[Account]: ...

    def delete_all(self) -> int: ...

    def find_by_name_like(self, match: str) -> List[Account]: ...


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlAlchemyAccountRepository:
    """Accounts stored through a SQLAlchemy session factory.

    Every call runs in its own session and transaction.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def count(self) -> int:
        with self.session_factory() as s:
            return s.scalar(select(func.count()).select_from(Account)) or 0

    def save(self, accounts: Sequence[Account]) -> None:
        with self.session_factory() as s:
            s.add_all(accounts)
            # ids are assigned by the database on flush
            s.commit()

    def delete_all(self) -> int:
        with self.session_factory() as s:
            deleted = s.execute(delete(Account)).rowcount
            s.commit()
            return deleted

    def find_all(self) -> List[Account]:
        with self.session_factory() as s:
            return list(s.scalars(select(Account).order_by(Account.id)))

    def find_by_name_like(self, match: str) -> List[Account]:
        # both sides folded by the database, so they agree on every letter
        pattern = func.upper(literal(f"%{_escape_like(match)}%"))
        stmt = (
            select(Account)
            .where(func.upper(Account.name).like(pattern, escape="\\"))
            .order_by(Account.id)
        )
        with self.session_factory() as s:
            return list(s.scalars(stmt))
