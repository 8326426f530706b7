import logging
import os

import uvicorn

from league_scoring.settings import load_settings

logger = logging.getLogger(__name__)
APP_MODULE = "league_scoring.main:app"
DEFAULT_PORT = 8000


def _port_from_env() -> int:
    for key in ("APP_PORT", "PORT"):
        value = os.getenv(key)
        if not value:
            continue
        if value.isdigit():
            return int(value)
        logger.warning("Ignoring %s=%s (not an integer)", key, value)
    return DEFAULT_PORT


def _tls_options() -> dict[str, str]:
    files = {
        "ssl_certfile": os.getenv("SSL_CERT_FILE"),
        "ssl_keyfile": os.getenv("SSL_KEY_FILE"),
    }
    if not any(files.values()):
        return {}
    if not all(files.values()):
        logger.warning("SSL_CERT_FILE and SSL_KEY_FILE must be set together; serving plain HTTP.")
        return {}
    password = os.getenv("SSL_KEY_PASSWORD")
    if password:
        files["ssl_keyfile_password"] = password
    logger.info("Serving HTTPS with certificate %s", files["ssl_certfile"])
    return files


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        APP_MODULE,
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=_port_from_env(),
        log_level=os.getenv("UVICORN_LOG_LEVEL", settings.log_level.lower()),
        **_tls_options(),
    )


if __name__ == "__main__":
    main()
