# accountdemo/routes/api_accounts.py
from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from accountdemo.services import AccountService

bp = Blueprint("accounts", __name__)


def _service() -> AccountService:
    return current_app.extensions["account_service"]


@bp.get("/accounts")
def all_accounts():
    return jsonify([a.to_dict() for a in _service().find_all()])


@bp.get("/accounts/search/<match>")
def search(match: str):
    """Accounts whose name contains ``match`` (case-insensitive)."""
    return jsonify([a.to_dict() for a in _service().find(match)])
