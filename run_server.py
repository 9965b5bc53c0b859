#!/usr/bin/env python3
import logging
import os

import uvicorn

from customer_api.core.config import settings
from customer_api.core.logging import setup_logging


logger = logging.getLogger("run_server")


def get_ssl_params() -> dict:
    key = settings.SSL_KEYFILE
    cert = settings.SSL_CERTFILE
    if not (key and cert and os.path.exists(key) and os.path.exists(cert)):
        logger.warning("Iniciando en HTTP (sin certificados SSL encontrados).")
        return {}
    logger.info("Usando certificados SSL para HTTPS.")
    return {"ssl_keyfile": key, "ssl_certfile": cert}


def main() -> None:
    setup_logging()
    params = get_ssl_params()
    protocolo = "https" if params else "http"
    logger.info(f"Levantando servidor en {protocolo}://{settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "customer_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
        **params,
    )


if __name__ == "__main__":
    main()
