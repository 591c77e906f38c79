# =============================================================================
# File: accountdemo/models.py
# Purpose: Account ORM model (table demo."Accounts").
# Notes:
# - SQLAlchemy 2.0 style (Mapped[...] + mapped_column)
# - Table name is plural for consistency with the SQL demos: "Accounts"
# =============================================================================
from __future__ import annotations

from typing import Any, Dict, Optional

from sqlalchemy import Identity, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .connection import DEMO_SCHEMA
from .db import Base


class Account(Base):
    """A bank account: owner name and balance."""

    __tablename__ = "Accounts"
    __table_args__ = {"schema": DEMO_SCHEMA}

    # Assigned by the database on insert, never changed afterwards
    id: Mapped[Optional[int]] = mapped_column("id", Integer, Identity(), primary_key=True)
    name: Mapped[str] = mapped_column("name", String(100), nullable=False)
    balance: Mapped[int] = mapped_column("balance", Integer, default=0, nullable=False)

    def __init__(self, name: str, balance: int = 0, **kw: Any) -> None:
        super().__init__(name=name, balance=balance, **kw)

    def credit(self, amount: int) -> None:
        self.balance += amount

    def debit(self, amount: int) -> None:
        # balance may go negative
        self.balance -= amount

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "balance": self.balance}

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, name={self.name!r}, balance={self.balance!r})"
