# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "msg": error.get("msg", ""),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def _first_message(context: dict[str, Any]) -> str:
    errors = context["errors"]
    if not errors:
        return "Invalid request"
    first = errors[0]
    msg = first["msg"].removeprefix("Value error, ")
    if first["field"] == "unknown":
        return msg
    return f"{first['field']}: {msg}"


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = format_pydantic_errors(exc)
    raise ValidationError(_first_message(context), context=context) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
