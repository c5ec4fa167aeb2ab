# app.py
import logging

from flask import Flask, current_app, request
from flask.logging import default_handler

import config
from api import api_bp
from dashboard import dashboard_bp
from errors import register_error_handlers
from extensions import cache, cache_control_for
from pages import pages_bp
from stats import stats_bp
from styles import status_label, style_for

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# ---------------- Logging ----------------
def configure_logging(app: Flask) -> None:
    level = getattr(logging, app.config["LOG_LEVEL"], logging.INFO)
    app.logger.removeHandler(default_handler)
    for name in (app.logger.name, "loaders"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)


# ---------------- Template helpers ----------------
def thousands(value) -> str:
    return f"{value:,}"


def register_template_helpers(app: Flask) -> None:
    app.add_template_filter(thousands)
    app.add_template_filter(status_label)
    app.add_template_global(style_for)

    @app.context_processor
    def site():
        return {"site_name": app.config["SITE_NAME"]}


def set_cache_control(response):
    view = current_app.view_functions.get(request.endpoint)
    header = cache_control_for(getattr(view, "revalidate", None))
    if header and response.status_code == 200:
        response.headers["Cache-Control"] = header
    return response


# ---------------- App & Config ----------------
def create_app(overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.update(config.flask_settings())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    cache.init_app(app)
    register_template_helpers(app)

    app.register_blueprint(pages_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(stats_bp)
    app.register_blueprint(api_bp)
    register_error_handlers(app)
    app.after_request(set_cache_control)

    app.logger.info("%s ready with %d routes", app.config["SITE_NAME"], len(list(app.url_map.iter_rules())))
    return app


app = create_app()

# ---------------- Main ----------------
if __name__ == "__main__":
    app.run(debug=True)
