# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from forum.infrastructure.container import Container
from forum.infrastructure.db import init_db
from forum.shared.logging import logger, setup_logging
from forum.shared.middleware.error_handler import configure_error_handling
from forum.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config

    setup_logging(config.debug_logging, level=config.log_level, log_file=config.log_file)
    init_db(container.engine)

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["forum.container"] = container

    configure_error_handling(app)
    configure_request_logging(app)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        return resp

    logger.info("Flask app initialized")
    return app


if __name__ == "__main__":
    create_app().run(host="127.0.0.1", port=8080, debug=False)
