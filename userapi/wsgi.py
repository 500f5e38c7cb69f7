# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""WSGI entry point: ``gunicorn userapi.wsgi:app`` or ``python -m userapi.wsgi``."""

import sys

from userapi.app import create_app
from userapi.shared.config import load_config
from userapi.shared.errors import StoreError
from userapi.shared.logging import logger


def _build():
    try:
        return create_app()
    except StoreError as exc:
        logger.error(f"unable to start the server: {exc}")
        sys.exit(1)


app = _build()


if __name__ == "__main__":
    port = load_config().port
    logger.info(f"User API listening on: http://localhost:{port}")
    app.run(host="0.0.0.0", port=port)
