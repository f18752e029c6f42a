"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from petcare.core.config import BaseConfig, get_config
from petcare.core.logger import configure_logging
from petcare.core.logger import init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config class, object or import path; ``APP_ENV`` decides
        when omitted.
    :param instance_relative_config: Load ``instance/<filename>`` overrides.
    :param instance_config_filename: Name of the optional instance config file.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from petcare.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from petcare.api import init_app as init_api

    init_api(app)

    from petcare.core import errors

    errors.init_app(app)

    from petcare import cli as app_cli

    app_cli.init_app(app)

    return app
