"""Translate core errors into click errors at the CLI boundary."""

from __future__ import annotations

import click
import structlog

from warehouse.domain.exceptions import DeserializationError, DomainException

logger = structlog.get_logger(__name__)

HANDLED_ERRORS = (DomainException, DeserializationError)


def to_click_error(exc: Exception) -> click.ClickException:
    if isinstance(exc, DomainException):
        logger.warning(
            "Operation rejected",
            kind=exc.kind.value,
            record_id=exc.record_id,
            error=str(exc),
        )
    else:
        logger.error("Could not read data file", error=str(exc))
    return click.ClickException(str(exc))
