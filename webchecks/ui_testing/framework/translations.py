"""
================================================================================
Translation Store and Resolver
================================================================================

Per-language translation bundles and the lookup used by every page object.

A bundle is a nested mapping ``group -> key -> text``. The default bundle
is complete; another language may leave a value ``null`` or omit it. Lookups
fall back to the default language whenever the requested language has no
bundle, the value is ``null`` or missing, or the getter raises.

Usage:
    >>> store = TranslationStore.from_directory("translations")
    >>> translator = Translator(store)
    >>> translator.resolve("polish", lambda t: t["footer"]["privacy"])
    'Prywatność'
    >>> translator.section(Language.POLISH, "cookies_modal")["accept_all"]
    'Zaakceptuj wszystko'

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterator, List, Mapping, Optional, TypeVar, Union

import yaml
from loguru import logger

from .languages import DEFAULT_LANGUAGE, Language


T = TypeVar("T")

Bundle = Mapping[str, Mapping[str, Optional[str]]]
LanguageLike = Union[Language, str, None]


class TranslationStoreError(Exception):
    """Raised when the default bundle is missing or lacks a value."""
    pass


class TranslationStore:
    """
    Static mapping from Language to its translation bundle.

    The default language's bundle defines the shape and must be complete.
    Other bundles may omit groups or keys; those fields resolve to the default
    text. Unknown groups and keys are logged and ignored.
    """

    def __init__(self, bundles: Mapping[Language, Bundle]) -> None:
        self._bundles: Dict[Language, Bundle] = {
            Language.parse(language): bundle for language, bundle in bundles.items()
        }
        self._validate()

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "TranslationStore":
        """
        Load ``<language>.yaml`` bundles from a directory.

        Files whose stem is not a known language are skipped.

        Args:
            directory: Directory holding the bundle files

        Returns:
            Validated TranslationStore
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise TranslationStoreError(f"Translation directory not found: {directory}")

        bundles: Dict[Language, Bundle] = {}
        for path in sorted(directory.glob("*.y*ml")):
            try:
                language = Language.parse(path.stem)
            except ValueError:
                logger.warning(f"Skipping translation file for unknown language: {path.name}")
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    bundles[language] = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise TranslationStoreError(f"Invalid YAML in {path}: {e}") from e
            logger.debug(f"Loaded {language.value} translations from: {path}")

        return cls(bundles)

    def _validate(self) -> None:
        default = self._bundles.get(DEFAULT_LANGUAGE)
        if default is None:
            raise TranslationStoreError(
                f"Default language '{DEFAULT_LANGUAGE.value}' has no translation bundle"
            )

        for group, entries in default.items():
            if not isinstance(entries, Mapping):
                raise TranslationStoreError(f"Group '{group}' of the default bundle is not a mapping")
            for key, value in entries.items():
                if value is None:
                    raise TranslationStoreError(
                        f"Default bundle is missing a value for {group}.{key}"
                    )

        # Omitted groups and keys resolve through the default bundle
        for language, bundle in self._bundles.items():
            if language is DEFAULT_LANGUAGE:
                continue
            for group, entries in bundle.items():
                if group not in default:
                    logger.warning(f"Bundle '{language.value}' has unknown group '{group}'")
                    continue
                if not isinstance(entries, Mapping):
                    continue
                unknown = sorted(set(entries) - set(default[group]))
                if unknown:
                    logger.warning(
                        f"Bundle '{language.value}' group '{group}' has unknown keys: {unknown}"
                    )

    def bundle(self, language: Optional[Language]) -> Optional[Bundle]:
        """Bundle for a language, or None when the store has none."""
        return self._bundles.get(language) if language is not None else None

    def keys(self, group: str) -> List[str]:
        """Keys of a group, in the default bundle's order."""
        try:
            return list(self._bundles[DEFAULT_LANGUAGE][group])
        except KeyError:
            raise TranslationStoreError(f"Unknown translation group: {group}") from None

    @property
    def languages(self) -> List[Language]:
        """Languages with a bundle, default first."""
        return [DEFAULT_LANGUAGE] + [
            language for language in Language
            if language in self._bundles and language is not DEFAULT_LANGUAGE
        ]

    def __contains__(self, language: object) -> bool:
        return language in self._bundles

    def __iter__(self) -> Iterator[Language]:
        return iter(self.languages)


class Translator:
    """
    Resolves translated strings with deterministic fallback to the default language.

    Two explicit steps:
        1. ``lookup``: apply the getter to the requested language's bundle,
           yielding None for a missing value or a failed path
        2. ``resolve``: when step 1 yields None, repeat it on the default
           bundle; only a None there is an error
    """

    def __init__(self, store: TranslationStore) -> None:
        self.store = store

    def _select(self, language: LanguageLike) -> Language:
        try:
            parsed = Language.parse(language)
        except ValueError:
            logger.debug(f"Unknown language {language!r}, using {DEFAULT_LANGUAGE.value}")
            return DEFAULT_LANGUAGE
        if parsed is None or parsed not in self.store:
            return DEFAULT_LANGUAGE
        return parsed

    def lookup(self, language: LanguageLike, getter: Callable[[Bundle], T]) -> Optional[T]:
        """
        Apply getter to the bundle of ``language`` (default when absent).

        Args:
            language: Requested language; None or a language without bundle selects the default
            getter: Function from bundle to the wanted value

        Returns:
            Value, or None when it is unset or the getter failed
        """
        selected = self._select(language)
        try:
            value = getter(self.store.bundle(selected))
        except Exception as e:
            logger.debug(f"Translation lookup failed for {selected.value}: {e!r}")
            return None
        if value is None:
            logger.debug(f"Translation value unset for {selected.value}")
        return value

    def resolve(self, language: LanguageLike, getter: Callable[[Bundle], T]) -> T:
        """
        Resolve a translated value with fallback to the default language.

        Args:
            language: Requested language (None means default)
            getter: Function from bundle to the wanted value

        Returns:
            The requested language's value, or the default language's value

        Raises:
            TranslationStoreError: The default bundle itself has no value
        """
        value = self.lookup(language, getter)
        if value is not None:
            return value

        value = self.lookup(DEFAULT_LANGUAGE, getter)
        if value is None:
            raise TranslationStoreError(
                f"Default language '{DEFAULT_LANGUAGE.value}' has no value for the requested field"
            )
        return value

    def section(self, language: LanguageLike, group: str) -> Dict[str, str]:
        """Every key of a group, each resolved with fallback, in bundle order."""
        return {
            key: self.resolve(language, lambda t, k=key: t[group][k])
            for key in self.store.keys(group)
        }

    def text(self, language: LanguageLike, group: str, key: str) -> str:
        return self.resolve(language, lambda t: t[group][key])


__all__ = [
    "Bundle",
    "TranslationStore",
    "TranslationStoreError",
    "Translator",
]
