from flask import Flask
from brcode.routes.pix import pix_bp
from brcode.error import register_erro_handlers
from brcode.rate_limit import limiter
from brcode.log import configurar_logging


def create_api(config=None):
    configurar_logging()

    app = Flask('BRCODE')

    if config:
        app.config.update(config)

    limiter.init_app(app)

    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
