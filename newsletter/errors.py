import logging
from http import HTTPStatus
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

from newsletter.config import Environments

logger = logging.getLogger(__name__)


class RouteError(Exception):
  """An error raised from a route that already knows its HTTP status."""

  def __init__(self, status, message):
    super().__init__(message)
    self.status = int(status)
    self.message = message


def handle_error(err):
  """Turn any exception raised by a handler into `{"error": ...}` JSON.

  `RouteError` keeps its own status and Werkzeug errors keep their code.
  Everything else is reported as 400.
  """
  if current_app.config["ENV_NAME"] != Environments.TEST:
    logger.exception(f"Request failed: {err}", exc_info=err)

  status = HTTPStatus.BAD_REQUEST
  message = str(err)
  if isinstance(err, RouteError):
    status = err.status
    message = err.message
  elif isinstance(err, HTTPException):
    status = err.code
    message = err.description

  return jsonify({"error": message}), status


def register_error_handler(app):
  app.register_error_handler(Exception, handle_error)
