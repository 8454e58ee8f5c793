"""Immutable template store: template identifier -> template body."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from merninit.core.errors import TemplateNotFound


class TemplateKind(str, Enum):
    """How a template body turns into emitted text."""

    LITERAL = "literal"
    STRUCTURED = "structured"


class Feature(str, Enum):
    """Language features a structured body needs from the parser."""

    JSX = "jsx"
    TYPESCRIPT = "typescript"


@dataclass(frozen=True, kw_only=True)
class Template:
    """
    A fixed fragment of source text used to populate a generated file.

    Attributes:
        kind: ``LITERAL`` bodies are returned verbatim, ``STRUCTURED`` bodies are
            parsed and regenerated.
        body: The template source text.
        features: Parser features needed by a structured body. Always empty for
            literal templates.
    """

    kind: TemplateKind
    body: str
    features: frozenset[Feature] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.kind is TemplateKind.LITERAL and self.features:
            raise ValueError("Literal templates do not take parser features.")

    @classmethod
    def literal(cls, body: str) -> Template:
        return cls(kind=TemplateKind.LITERAL, body=body)

    @classmethod
    def structured(cls, body: str, *features: Feature) -> Template:
        return cls(kind=TemplateKind.STRUCTURED, body=body, features=frozenset(features))


def key_name(key: str | Enum) -> str:
    """Plain string form of a template key."""
    # str enums hash by member name, so normalise to the plain value first
    return key.value if isinstance(key, Enum) else key


class TemplateStore(Mapping[str, Template]):
    """
    Read-only catalog of templates keyed by case-sensitive identifiers.

    The store is filled once from ``(key, template)`` pairs and never mutated
    afterwards. Registering the same key twice is rejected.
    """

    def __init__(self, entries: Iterable[tuple[str | Enum, Template]]) -> None:
        templates: dict[str, Template] = {}
        for key, template in entries:
            k = key_name(key)
            if k in templates:
                raise ValueError(f"Duplicate template key {k!r}.")
            templates[k] = template
        self._templates: Mapping[str, Template] = MappingProxyType(templates)

    def lookup(self, key: str | Enum) -> Template:
        """Return the template registered under *key* or raise ``TemplateNotFound``."""
        k = key_name(key)
        try:
            return self._templates[k]
        except KeyError:
            raise TemplateNotFound(k) from None

    def __getitem__(self, key: str) -> Template:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key_name(key) in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateStore({len(self)} templates)"
