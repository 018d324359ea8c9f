"""PocketDiary application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable, Optional

from flask import Flask, jsonify

from . import cli as _cli
from .clock import Clock
from .config import BaseConfig, DevConfig, TestConfig

__version__ = "0.1.0"

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths registered on every app."""

    yield "pocketdiary.blueprints.auth"
    yield "pocketdiary.blueprints.diary"
    yield "pocketdiary.blueprints.streak"


def create_app(config_name: str | None = None, *, clock: Optional[Clock] = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["POCKETDIARY_CONFIG"] = config_obj
    app.config.setdefault("SESSION_COOKIE_HTTPONLY", True)
    app.config.setdefault("SESSION_COOKIE_SAMESITE", "Lax")
    if clock is not None:
        app.config["POCKETDIARY_CLOCK"] = clock

    from .logging_config import setup_logging

    setup_logging(config_obj)

    from .errors import register_error_handlers
    from .extensions import init_db

    init_db(app)
    register_error_handlers(app)
    _register_blueprints(app)
    _cli.init_app(app)

    @app.get("/healthz")
    def healthz():
        return jsonify({"status": "ok"})

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
