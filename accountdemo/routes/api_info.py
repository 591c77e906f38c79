# accountdemo/routes/api_info.py
import logging
import os

from flask import Blueprint, current_app, jsonify, render_template

bp = Blueprint("info", __name__)

log = logging.getLogger(__name__)


def terminate() -> None:
    """Stop the process at once, without unwinding the request."""
    os._exit(0)


@bp.get("/")
def home():
    log.info("Root URL")
    return render_template("index.html")


@bp.get("/info")
def info():
    log.info("info URL")
    settings = current_app.extensions["settings"]
    return jsonify(settings.connection_info())


@bp.get("/shutdown")
def shutdown():
    log.warning("Application shutting down on request")
    hook = current_app.config.get("SHUTDOWN_HOOK") or terminate
    hook()
    # only reached when the hook does not exit (tests)
    return "", 204
