# PATH: apps/api/common/exceptions.py
"""
DRF exception handler.

Every error body carries ``detail``; validation errors also carry
``errors`` (field -> list of messages) so clients can render them inline.
"""
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _flatten(value):
    if isinstance(value, dict):
        for v in value.values():
            yield from _flatten(v)
    elif isinstance(value, (list, tuple)):
        for v in value:
            yield from _flatten(v)
    else:
        yield value


def _as_error_bag(data) -> dict:
    if isinstance(data, dict):
        return {field: [str(m) for m in _flatten(messages)] for field, messages in data.items()}
    return {"non_field_errors": [str(m) for m in _flatten(data)]}


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        errors = _as_error_bag(response.data)
        first = next(iter(errors.values()), [])
        response.data = {
            "detail": first[0] if first else "Invalid input.",
            "errors": errors,
        }
        return response

    if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("API error %s: %s", response.status_code, exc)

    if isinstance(response.data, dict) and "detail" in response.data:
        return response

    response.data = {"detail": str(getattr(exc, "detail", exc))}
    return response
