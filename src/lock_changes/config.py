"""Action input loading.

GitHub Actions exposes each input ``name`` as the ``INPUT_<NAME>`` environment
variable (upper-cased, spaces replaced by underscores). Inputs left empty fall
back to the defaults declared in ``action.yml`` so the package also runs
outside a workflow.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError
from .render import DEFAULT_COLLAPSIBLE_THRESHOLD

DEFAULT_PATH = "package-lock.json"

TRUE_VALUES = {"true", "yes", "y", "on"}
FALSE_VALUES = {"false", "no", "n", "off"}


@dataclass(slots=True, frozen=True)
class Inputs:
    """Validated action inputs."""

    token: str
    path: str = DEFAULT_PATH
    collapsible_threshold: int = DEFAULT_COLLAPSIBLE_THRESHOLD
    update_comment: bool = True

    def __repr__(self) -> str:
        return (
            f"Inputs(token='***', path={self.path!r}, "
            f"collapsible_threshold={self.collapsible_threshold}, "
            f"update_comment={self.update_comment})"
        )


def _env_name(name: str) -> str:
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str,
    environ: Mapping[str, str] = os.environ,
    *,
    required: bool = False,
) -> str:
    """Return the trimmed value of an action input, or ``""`` when unset."""
    value = environ.get(_env_name(name), "").strip()
    if required and not value:
        raise ConfigError(f"Input required and not supplied: {name}")
    return value


def get_boolean_input(
    name: str,
    environ: Mapping[str, str] = os.environ,
    default: bool | None = None,
) -> bool:
    """Interpret an input as a boolean.

    Accepts ``true/yes/y/on`` and ``false/no/n/off`` in any case. Any other
    value raises ConfigError; an empty value returns ``default`` when given.
    """
    value = get_input(name, environ).lower()
    if not value and default is not None:
        return default
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False

    raise ConfigError(f"💥 Wrong boolean value of the input '{name}', aborting!")


def get_int_input(
    name: str,
    environ: Mapping[str, str] = os.environ,
    default: int = 0,
) -> int:
    """Interpret an input as an integer, clamping negative values to zero."""
    value = get_input(name, environ)
    if not value:
        return default
    try:
        number = int(value, 10)
    except ValueError as exc:
        raise ConfigError(f"💥 Wrong integer value of the input '{name}', aborting!") from exc
    return max(number, 0)


def load_inputs(environ: Mapping[str, str] = os.environ) -> Inputs:
    """Load and validate all action inputs.

    Raises:
        ConfigError: If the token is missing or a value cannot be interpreted.
    """
    return Inputs(
        token=get_input("token", environ, required=True),
        path=get_input("path", environ) or DEFAULT_PATH,
        collapsible_threshold=get_int_input(
            "collapsibleThreshold", environ, default=DEFAULT_COLLAPSIBLE_THRESHOLD
        ),
        update_comment=get_boolean_input("updateComment", environ, default=True),
    )
