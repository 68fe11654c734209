"""Library settings.

Settings are read once from environment variables and cached:

    MOMENTO_DEFAULT_LOCALE=en-gb
    MOMENTO_MAX_MACRO_PASSES=32

Call ``reset_settings()`` after changing the environment (tests do this)
to have the next ``get_settings()`` re-read it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from momento.errors import ValidationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "MOMENTO_"

DEFAULT_LOCALE = "en-us"
DEFAULT_MAX_MACRO_PASSES = 16


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults.

    Attributes:
        default_locale: Locale used when none is given explicitly.
        max_macro_passes: Upper bound on macro expansion passes before a
            locale is reported as cyclic.
    """

    default_locale: str = DEFAULT_LOCALE
    max_macro_passes: int = DEFAULT_MAX_MACRO_PASSES

    def __post_init__(self) -> None:
        if not isinstance(self.default_locale, str) or not self.default_locale.strip():
            raise ValidationError("default_locale must be a non-empty string")
        if (
            not isinstance(self.max_macro_passes, int)
            or isinstance(self.max_macro_passes, bool)
            or self.max_macro_passes < 1
        ):
            raise ValidationError(
                f"max_macro_passes must be a positive integer, got {self.max_macro_passes!r}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build Settings from ``MOMENTO_*`` variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            ValidationError: If a variable holds an unusable value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        locale_name = env.get(f"{ENV_PREFIX}DEFAULT_LOCALE")
        if locale_name is not None:
            values["default_locale"] = locale_name.strip()

        passes = env.get(f"{ENV_PREFIX}MAX_MACRO_PASSES")
        if passes is not None:
            try:
                values["max_macro_passes"] = int(passes)
            except ValueError:
                raise ValidationError(
                    f"{ENV_PREFIX}MAX_MACRO_PASSES must be an integer, got {passes!r}"
                ) from None

        if values:
            logger.debug("Settings overridden from environment: %s", sorted(values))
        return cls(**values)  # type: ignore[arg-type]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached process settings."""
    return Settings.from_env()


def reset_settings() -> None:
    """Drop cached settings so the environment is read again."""
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_LOCALE",
    "DEFAULT_MAX_MACRO_PASSES",
    "Settings",
    "get_settings",
    "reset_settings",
]
