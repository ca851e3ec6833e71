import os
from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


class Environments:
  DEV = "development"
  TEST = "test"
  PRODUCTION = "production"


def _as_bool(value, default=False):
  if value is None:
    return default
  return value.strip().lower() in ["true", "1", "t", "y", "yes"]


def load_config():
  """Read server settings from the environment (and `.env` if present)."""
  return {
    "ENV_NAME": os.getenv("APP_ENV", Environments.DEV),
    "HOST": os.getenv("HOST", "0.0.0.0"),
    "PORT": int(os.getenv("PORT", "3000")),
    "SECRET_KEY": os.getenv("COOKIE_SECRET", "dev-cookie-secret"),
    "SESSION_COOKIE_DOMAIN": os.getenv("COOKIE_DOMAIN") or None,
    "SESSION_COOKIE_PATH": os.getenv("COOKIE_PATH", "/"),
    "SESSION_COOKIE_SECURE": _as_bool(os.getenv("SECURE_COOKIE")),
    "DATABASE_PATH": os.getenv("DATABASE_PATH") or os.path.join(PACKAGE_DIR, "database.json"),
    "VIEWS_DIR": os.path.join(PACKAGE_DIR, "views"),
    "STATIC_DIR": os.path.join(PACKAGE_DIR, "public"),
    "MJML_TEMPLATES_DIR": os.path.join(PACKAGE_DIR, "mjml_templates"),
  }
