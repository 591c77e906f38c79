# File: accountdemo/seed.py
# Purpose: Load the demo account data from data/accounts.yml.

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import yaml

log = logging.getLogger(__name__)

CONFIG_PATH = (
    Path(__file__)
    .resolve()
    .parent        # accountdemo/
    / "data"
    / "accounts.yml"
)


@dataclass(frozen=True)
class AccountData:
    """Name and opening balance of one demo account."""

    name: str
    balance: int


_DEFAULT_ACCOUNTS: Tuple[Tuple[str, int], ...] = (
    ("Ayesha", 15000),
    ("Ada", 47000),
    ("Andrei", 52900),
    ("Bobo", 4750),
    ("Chung", 4000),
    ("Cruz", 55000),
    ("Fang", 90000),
    ("Kungawo", 69500),
    ("Leslie", 72000),
    ("Matt", 100000),
    ("Max", 47000),
    ("Maya", 8000),
    ("Mia", 40800),
    ("Morgan", 10000),
    ("Silas", 11000),
    ("Stefan", 2000),
    ("Taj", 63000),
    ("Tyler", 20000),
    ("Uma", 47000),
    ("Val", 2500),
    ("Zoe", 6700),
)


def default_accounts() -> List[AccountData]:
    """Fallback when the YAML is missing or invalid."""
    return [AccountData(name, balance) for name, balance in _DEFAULT_ACCOUNTS]


def load_seed_accounts(path: Path | None = None) -> List[AccountData]:
    """Load the seed accounts from YAML.

    The file holds an ``accounts`` list of ``{name, balance}`` mappings.
    Any problem falls back to the built-in list.
    """
    path = path or CONFIG_PATH

    if not path.exists():
        log.warning("accounts.yml not found (%s), using defaults.", path)
        return default_accounts()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        log.error("Error while loading %s: %s", path, e)
        return default_accounts()

    items = raw.get("accounts") if isinstance(raw, dict) else None
    if not isinstance(items, list):
        log.error("accounts.yml: 'accounts' is not a list, using defaults.")
        return default_accounts()

    cleaned: List[AccountData] = []
    for it in items:
        if not isinstance(it, dict):
            continue

        name = str(it.get("name") or "").strip()
        if not name:
            continue

        try:
            balance = int(it.get("balance") or 0)
        except (TypeError, ValueError):
            log.warning("accounts.yml: bad balance for %s, skipped.", name)
            continue

        cleaned.append(AccountData(name, balance))

    if not cleaned:
        log.warning("accounts.yml has no valid account, using defaults.")
        return default_accounts()

    return cleaned


ACCOUNT_DATA: List[AccountData] = default_accounts()
ACCOUNTS_EXPECTED = len(ACCOUNT_DATA)
