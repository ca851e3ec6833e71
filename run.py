import logging
import sys
from newsletter import create_app


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
)

logger = logging.getLogger(__name__)


app = create_app()


if __name__ == "__main__":
    host = app.config["HOST"]
    port = app.config["PORT"]
    logger.info(f" Newsletter server starting on {host}:{port} ({app.config['ENV_NAME']})")
    try:
        app.run(host=host, port=port, debug=False, use_reloader=False)
    except Exception:
        logger.exception(" Flask crashed:")
        sys.exit(1)
