from __future__ import annotations

import datetime
import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Literal

import pytest
from pydantic import BaseModel, Strict

from confstrap.errors import InvalidDefaultConfigError, MalformedConfigError
from confstrap.partial import PartialConfig, load_partial, parse_partial


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


class PartialWindow(PartialConfig):
    width: int | None = None
    height: int | None = None


class PartialSettings(PartialConfig):
    name: str | None = None
    ratio: float | None = None
    enabled: bool | None = None
    tags: list[str] | None = None
    aliases: Sequence[str] | None = None
    ports: Annotated[set[int], Strict(False)] | None = None
    limits: dict[str, int] | None = None
    origin: Annotated[tuple[int, int], Strict(False)] | None = None
    window: PartialWindow | None = None
    log_dir: Annotated[Path, Strict(False)] | None = None
    started: datetime.date | None = None
    theme: Annotated[Theme, Strict(False)] | None = None
    mode: Literal["fast", "slow"] | None = None
    extra: Any = None


class NotPartial(BaseModel):
    required: int


def test_all_absent_partial_from_empty_text():
    partial = load_partial("", PartialSettings)

    assert partial == PartialSettings()


def test_present_values_are_typed():
    partial = load_partial(
        """
name = "clock"
ratio = 2
enabled = true
tags = ["a", "b"]
aliases = ["x"]
ports = [80, 443]
log_dir = "/var/log/clock"
started = 2024-01-01
theme = "dark"
mode = "fast"
origin = [3, 4]
extra = { anything = [1, "two"] }

[limits]
fps = 30

[window]
width = 800
""",
        PartialSettings,
    )

    assert partial.name == "clock"
    assert partial.ratio == 2.0
    assert partial.enabled is True
    assert partial.tags == ["a", "b"]
    assert list(partial.aliases) == ["x"]
    assert partial.ports == {80, 443}
    assert partial.limits == {"fps": 30}
    assert partial.origin == (3, 4)
    assert partial.window == PartialWindow(width=800)
    assert partial.log_dir == Path("/var/log/clock")
    assert partial.started == datetime.date(2024, 1, 1)
    assert partial.theme is Theme.DARK
    assert partial.mode == "fast"
    assert partial.extra == {"anything": [1, "two"]}


def test_unknown_keys_are_ignored():
    partial = load_partial('name = "x"\nunknown = 5\n[window]\ndepth = 3', PartialSettings)

    assert partial.name == "x"
    assert partial.window == PartialWindow()


@pytest.mark.parametrize(
    "text, key",
    [
        ('name = 5', "name"),
        ('enabled = "yes"', "enabled"),
        ("ratio = true", "ratio"),
        ("tags = [1, 2]", "tags.0"),
        ('aliases = "abc"', "aliases"),
        ("[window]\nwidth = \"wide\"", "window.width"),
        ("[window]\nwidth = false", "window.width"),
        ("theme = \"sepia\"", "theme"),
        ("mode = \"medium\"", "mode"),
        ("origin = [1, 2, 3]", "origin"),
    ],
)
def test_type_mismatch_is_malformed(text, key):
    with pytest.raises(MalformedConfigError) as excinfo:
        load_partial(text, PartialSettings)

    assert key in str(excinfo.value)


def test_syntax_error_is_malformed():
    with pytest.raises(MalformedConfigError):
        load_partial("this is = = not toml", PartialSettings)


def test_non_model_partial_type_is_rejected():
    with pytest.raises(TypeError):
        load_partial("", dict)


def test_partial_with_required_field_is_rejected_up_front():
    with pytest.raises(TypeError):
        load_partial("required = 1", NotPartial)


def test_parse_partial_prefers_raw_text():
    partial = parse_partial('name = "user"', 'name = "default"', PartialSettings)

    assert partial.name == "user"


def test_parse_partial_falls_back_to_default(caplog):
    caplog.set_level(logging.WARNING, logger="confstrap.partial")

    partial = parse_partial("name = [oops", 'name = "default"', PartialSettings)

    assert partial.name == "default"
    assert "Malformed configuration" in caplog.text


def test_parse_partial_falls_back_on_wrong_type():
    partial = parse_partial("name = 5", 'name = "default"', PartialSettings)

    assert partial == PartialSettings(name="default")


def test_parse_partial_invalid_default_is_fatal():
    with pytest.raises(InvalidDefaultConfigError) as excinfo:
        parse_partial("name = [oops", "also = = broken", PartialSettings)

    assert isinstance(excinfo.value.__cause__, MalformedConfigError)
