"""Template registry and code renderer."""

from merninit.core.catalog import TEMPLATES, TemplateKey
from merninit.core.errors import (
    SourceSyntaxError,
    TemplateError,
    TemplateNotFound,
    TemplateParseError,
)
from merninit.core.renderer import CodeRenderer
from merninit.core.store import Feature, Template, TemplateKind, TemplateStore

__all__ = [
    "TEMPLATES",
    "CodeRenderer",
    "Feature",
    "SourceSyntaxError",
    "Template",
    "TemplateError",
    "TemplateKey",
    "TemplateKind",
    "TemplateNotFound",
    "TemplateParseError",
    "TemplateStore",
]
