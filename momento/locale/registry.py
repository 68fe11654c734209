"""Locale registry.

The registry is an immutable name -> Locale mapping built once at import.
Adding a locale produces a new registry; the default one never changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from momento.config import get_settings
from momento.errors import LocaleError
from momento.locale.en_gb import EN_GB
from momento.locale.en_us import EN_US
from momento.locale.locale import Locale

logger = logging.getLogger(__name__)


def normalize_name(name: str) -> str:
    """Normalize a locale name: ``"en_US"`` -> ``"en-us"``.

    Examples:
        >>> normalize_name(" EN_gb ")
        'en-gb'
    """
    return name.strip().lower().replace("_", "-")


class LocaleRegistry(Mapping[str, Locale]):
    """Read-only mapping of normalized locale names to Locales.

    Lookups normalize the key, so ``registry["en_US"]`` finds "en-us".

    Examples:
        >>> registry = LocaleRegistry([EN_US])
        >>> registry.resolve("EN_US").name
        'en-us'
        >>> registry.names()
        ('en-us',)
    """

    __slots__ = ("_locales",)

    def __init__(self, locales: Iterable[Locale] = ()) -> None:
        table: dict[str, Locale] = {}
        for locale in locales:
            if not isinstance(locale, Locale):
                raise LocaleError(f"registry entries must be Locales, got {type(locale).__name__}")
            table[normalize_name(locale.name)] = locale
        self._locales: Mapping[str, Locale] = MappingProxyType(table)
        logger.debug("Built locale registry with %d locale(s): %s", len(table), sorted(table))

    def __getitem__(self, name: str) -> Locale:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._locales[normalize_name(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __repr__(self) -> str:
        return f"LocaleRegistry({list(self._locales)!r})"

    def names(self) -> tuple[str, ...]:
        """Return the registered names, sorted."""
        return tuple(sorted(self._locales))

    def resolve(self, name: str) -> Locale:
        """Return the Locale registered as ``name``.

        Raises:
            LocaleError: If no such locale is registered.
        """
        try:
            return self[name]
        except KeyError:
            raise LocaleError(
                f"unknown locale {name!r}; available: {', '.join(self.names())}"
            ) from None

    def with_locale(self, locale: Locale) -> LocaleRegistry:
        """Return a new registry that also holds ``locale``.

        An existing entry with the same name is replaced in the copy.
        """
        return LocaleRegistry([*self._locales.values(), locale])


DEFAULT_REGISTRY = LocaleRegistry([EN_US, EN_GB])


def get_locale(name: str | None = None, registry: LocaleRegistry | None = None) -> Locale:
    """Resolve ``name`` (or the configured default) to a Locale.

    Raises:
        LocaleError: If the name is unknown.

    Examples:
        >>> get_locale("en-GB").week.dow
        1
    """
    source = DEFAULT_REGISTRY if registry is None else registry
    if name is None:
        name = get_settings().default_locale
    return source.resolve(name)


__all__ = [
    "DEFAULT_REGISTRY",
    "LocaleRegistry",
    "get_locale",
    "normalize_name",
]
