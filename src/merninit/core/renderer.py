"""Turns template keys into emitted source text."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

from merninit.core.catalog import TEMPLATES
from merninit.core.errors import SourceSyntaxError, TemplateParseError
from merninit.core.store import Feature, TemplateKind, TemplateStore, key_name
from merninit.core.syntax import ParsedSource, parse_source, regenerate

log = logging.getLogger(__name__)

SourceParser = Callable[[str, Iterable[Feature]], ParsedSource]


@dataclass(frozen=True)
class _Rendered:
    parsed: ParsedSource
    text: str


class CodeRenderer:
    """
    Returns the final text for a template key.

    Literal templates are returned verbatim. Structured templates are parsed
    with their declared features and regenerated on first use; the parsed tree
    and the regenerated text are cached on this instance for the rest of its
    lifetime. The cache is never invalidated since template bodies do not
    change at runtime.

    Args:
        store: Templates to serve. Defaults to the shipped catalog.
        parser: Parse step for structured templates. Must raise
            ``SourceSyntaxError`` on malformed input.
    """

    def __init__(
        self,
        store: TemplateStore = TEMPLATES,
        parser: SourceParser = parse_source,
    ) -> None:
        self.store = store
        self._parse = parser
        self._cache: dict[str, _Rendered] = {}

    def generate(self, key: str | Enum) -> str:
        """Return the emitted text for *key*.

        Raises:
            TemplateNotFound: *key* is not registered.
            TemplateParseError: a structured body failed to parse.
        """
        template = self.store.lookup(key)
        if template.kind is TemplateKind.LITERAL:
            return template.body
        return self._render(key_name(key)).text

    def parsed(self, key: str | Enum) -> ParsedSource:
        """Return the cached syntax tree of a structured template, rendering it if needed."""
        template = self.store.lookup(key)
        if template.kind is TemplateKind.LITERAL:
            raise ValueError(f"Template {key_name(key)!r} is literal and has no syntax tree.")
        return self._render(key_name(key)).parsed

    def is_cached(self, key: str | Enum) -> bool:
        return key_name(key) in self._cache

    def warm(self) -> list[str]:
        """Render every structured template once. Returns the keys rendered."""
        rendered = [
            key
            for key in self.store
            if self.store.lookup(key).kind is TemplateKind.STRUCTURED
        ]
        for key in rendered:
            self._render(key)
        return rendered

    def _render(self, key: str) -> _Rendered:
        cached = self._cache.get(key)
        if cached is not None:
            log.debug("cache hit for %s", key)
            return cached

        template = self.store.lookup(key)
        log.debug("parsing %s with features %s", key, sorted(f.value for f in template.features))
        try:
            parsed = self._parse(template.body, template.features)
        except SourceSyntaxError as exc:
            raise TemplateParseError(key, exc) from exc

        entry = _Rendered(parsed=parsed, text=regenerate(parsed))
        self._cache[key] = entry
        return entry
