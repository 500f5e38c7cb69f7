# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from userapi.infrastructure.db import ENGINE
from userapi.shared.logging import logger


def database_status() -> dict[str, Any]:
    started = time.perf_counter()
    try:
        with ENGINE.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning(f"health: database unreachable ({type(exc).__name__})")
        return {"ok": False, "database": "unavailable"}
    latency_ms = (time.perf_counter() - started) * 1000.0
    return {"ok": True, "database": "ok", "latency_ms": round(latency_ms, 1)}


__all__ = ["database_status"]
