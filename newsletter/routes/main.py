import logging
from flask import Blueprint, current_app, redirect, send_from_directory
from newsletter.services.email_render import (
  HOLIDAY_RECIPES_MJML,
  render_mjml,
  render_template_file,
)

main_bp = Blueprint("main", __name__)
logger = logging.getLogger(__name__)

HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


@main_bp.route("/")
def index():
  """Send visitors to the newsletter preview by default."""
  return redirect("/email")


@main_bp.route("/email")
def email():
  """Render the holiday recipes newsletter from its MJML markup.

  Returns:
    Response: 200 HTML produced by the MJML compiler.
  """
  html = render_mjml(HOLIDAY_RECIPES_MJML)
  return html, 200, HTML_HEADERS


@main_bp.route("/email/<string:name>")
def email_template(name):
  """Render `<name>.mjml` from the templates directory.

  Args:
    name (str): Template file name without the `.mjml` extension.

  Returns:
    Response: 200 HTML, 404 JSON if the template does not exist.
  """
  html = render_template_file(name)
  logger.debug(f"Rendered MJML template {name}")
  return html, 200, HTML_HEADERS


@main_bp.route("/users")
def users():
  """Serve the static users page."""
  return send_from_directory(current_app.config["VIEWS_DIR"], "users.html")
