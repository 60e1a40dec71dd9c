"""Module entrypoint for the mock server.

Starts the FastAPI app under uvicorn. Configuration comes from the
environment only (see pulsekeys_mock.config):
  PORT                     listen port, default 3000
  PULSEKEYS_HOST           bind address, default 0.0.0.0
  PULSEKEYS_LOG_LEVEL      default info
  PULSEKEYS_PROXY_HEADERS  trust X-Forwarded-* headers, default on
"""

from __future__ import annotations

import logging

import uvicorn

from .config import Settings, load_settings


log = logging.getLogger("pulsekeys_mock.__main__")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    settings = load_settings()
    configure_logging(settings)

    log.info("PulseKeys API listening on %s", settings.public_url)
    uvicorn.run(
        "pulsekeys_mock.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        # UI mocks are often run behind reverse proxies / tunnels.
        proxy_headers=settings.proxy_headers,
        forwarded_allow_ips="*",
    )


if __name__ == "__main__":
    main()
