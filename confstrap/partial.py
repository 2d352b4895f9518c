"""
Parse TOML text into *partial* config models.

A partial is a pydantic model whose fields are all ``X | None = None``:
absent keys stay ``None`` and unknown keys are ignored. ``PartialConfig``
validates strictly, so a TOML ``true`` is never an ``int`` and ``"10"`` is
never a number. Fields that need converting from a TOML primitive (``Path``,
enums, tuples) opt out per type with ``Annotated[X, Strict(False)]``.

Example::

    class PartialConf(PartialConfig):
        something: int | None = None
        what: str | None = None

    parse_partial(user_text, "something = 10", PartialConf)
"""

from __future__ import annotations

import logging
import tomllib
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidDefaultConfigError, MalformedConfigError

logger = logging.getLogger(__name__)


class PartialConfig(BaseModel):
    """Base for partial schemas: strict, frozen, unknown keys ignored."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")


P = TypeVar("P", bound=BaseModel)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    )


def _check_partial_type(partial_type: type) -> None:
    if not (isinstance(partial_type, type) and issubclass(partial_type, BaseModel)):
        raise TypeError(f"{partial_type!r} is not a pydantic model type")

    required = [name for name, field in partial_type.model_fields.items() if field.is_required()]
    if required:
        raise TypeError(
            f"{partial_type.__name__} is not a valid partial, fields without defaults: {', '.join(required)}"
        )


def load_partial(text: str, partial_type: type[P]) -> P:
    """
    Strictly parse ``text`` into ``partial_type``.

    Raises ``MalformedConfigError`` on TOML syntax errors or type mismatches
    and ``TypeError`` when ``partial_type`` cannot represent the all-absent
    config.
    """
    _check_partial_type(partial_type)

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise MalformedConfigError(f"Invalid TOML: {exc}") from exc

    try:
        return partial_type.model_validate(data)
    except ValidationError as exc:
        raise MalformedConfigError(_describe(exc)) from exc


def parse_partial(raw_text: str, default_text: str, partial_type: type[P]) -> P:
    """
    Parse ``raw_text``, falling back to ``default_text`` when it is malformed.

    A malformed ``default_text`` raises ``InvalidDefaultConfigError``.
    """
    try:
        return load_partial(raw_text, partial_type)
    except MalformedConfigError as exc:
        logger.warning("Malformed configuration, using defaults instead: %s", exc)

    try:
        return load_partial(default_text, partial_type)
    except MalformedConfigError as exc:
        raise InvalidDefaultConfigError(
            f"Default configuration for {partial_type.__name__} is invalid: {exc}"
        ) from exc


__all__ = ["PartialConfig", "load_partial", "parse_partial"]
