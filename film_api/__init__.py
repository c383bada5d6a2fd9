import logging
import time

import click
from flask import Flask, g, request
from werkzeug.exceptions import HTTPException

from film_api import security
from film_api.config import config as default_config
from film_api.models import db
from film_api.models.user import ADMIN_ROLE
from film_api.responses import text_response
from film_api.routes import register_routes
from film_api.schemas import ma
from film_api.store import Store, StoreError

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGES = {404: "not found", 405: "unexpected method"}


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(config or default_config)

    db.init_app(app)
    ma.init_app(app)

    store = Store(db)
    app.extensions["store"] = store

    @app.get("/")
    def hello():
        return text_response("Hello world!")

    register_routes(app, store)
    register_request_logging(app)
    register_error_handlers(app)
    register_commands(app, store)
    return app


def register_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop("request_started", None)
        if started is not None:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s: %dms", request.method, request.full_path.rstrip("?"), elapsed_ms)
        return response


def register_error_handlers(app):
    @app.errorhandler(HTTPException)
    def plain_text_error(err):
        # abort(code, "reason") carries its own text, routing errors fall back to ours
        message = err.description
        if message == type(err).description:
            message = DEFAULT_ERROR_MESSAGES.get(err.code, err.name.lower())
        headers = None
        if getattr(err, "valid_methods", None):
            headers = {"Allow": ", ".join(err.valid_methods)}
        return text_response(message, err.code, headers=headers)

    @app.errorhandler(StoreError)
    def store_failure(err):
        logger.error("%s %s: %s", request.method, request.path, err, exc_info=err.__cause__)
        return text_response("internal server error", 500)


def register_commands(app, store):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        db.create_all()
        click.echo("database initialised")

    @app.cli.command("create-admin")
    @click.argument("name")
    @click.argument("password")
    def create_admin(name, password):
        """Add a user allowed to create, update and delete records."""
        store.add_user(name, security.get_password_hash(password), ADMIN_ROLE)
        click.echo(f"admin {name} created")
