from flask import Flask
from flask_cors import CORS
from flasgger import Swagger

from newsletter.config import Environments, load_config
from newsletter.errors import register_error_handler
from newsletter.middleware import register_request_logging, register_security_headers


def create_app(overrides=None):
  config = load_config()
  if overrides:
    config.update(overrides)

  app = Flask(
    __name__,
    static_folder=config["STATIC_DIR"],
    static_url_path="",
  )
  app.config.update(config)

  app.config['SWAGGER'] = {
        'title': 'Newsletter Server API',
        'uiversion': 3,
    }

  # Middleware order matters: request logging first, then security headers.
  if app.config["ENV_NAME"] == Environments.DEV:
    register_request_logging(app)
  if app.config["ENV_NAME"] == Environments.PRODUCTION:
    register_security_headers(app)

  from newsletter.routes.api import api_bp
  app.register_blueprint(api_bp)

  register_error_handler(app)

  from newsletter.routes.main import main_bp
  app.register_blueprint(main_bp)

  CORS(app)
  Swagger(app)

  return app
