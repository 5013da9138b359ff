import logging
from flask import Flask
from express_carrier.config import Config

log = logging.getLogger("app")


def create_app(test_config=None):
    app = Flask(__name__, instance_relative_config=True)
    if test_config is None:
        app.config.from_object(Config)
    else:
        app.config.from_mapping(test_config)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    from .web import home_bp

    app.register_blueprint(home_bp)

    log.info(f"Registered blueprints: {', '.join(app.blueprints)}")

    return app
