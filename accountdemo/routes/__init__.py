# =============================================================================
# File: accountdemo/routes/__init__.py
# Purpose: Group and register every blueprint.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .api_accounts import bp as accounts_bp
from .api_info import bp as info_bp

def register_routes(app: Flask) -> None:
    """Register all blueprints on the Flask app."""
    app.register_blueprint(info_bp)
    app.register_blueprint(accounts_bp)
