# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from useraccounts.container import Container
from useraccounts.infrastructure.db import build_engine, build_session_factory, init_db
from useraccounts.shared.config import AppConfig, load_config
from useraccounts.shared.logging import logger, setup_logging
from useraccounts.shared.middleware.error_handler import configure_error_handling
from useraccounts.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    engine = build_engine(config.database)
    init_db(engine)
    container = Container(config, build_session_factory(engine))

    app = Flask(__name__)
    app.extensions["useraccounts"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, "
        f"token_alg={config.token.algorithm}, token_ttl={config.token.ttl_seconds}s)"
    )
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True)
