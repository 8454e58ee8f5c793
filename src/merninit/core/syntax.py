"""Parse and regenerate JavaScript / TypeScript source with tree-sitter.

Structured templates are run through :func:`parse_source` and
:func:`regenerate` before being emitted. Parsing rejects any body that the
selected grammar does not accept, and regeneration re-emits the token stream
with normalised inter-token whitespace:

- trailing blanks at line ends are dropped,
- runs of blank lines collapse to a single blank line,
- runs of spaces inside a line collapse to a single space,
- the text ends with exactly one newline.

String-like nodes (strings, template strings, regexes, JSX text, comments) are
emitted verbatim.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from functools import cache

import tree_sitter_javascript as ts_javascript
import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser, Tree

from merninit.core.errors import SourceSyntaxError
from merninit.core.store import Feature

_VERBATIM_NODES: frozenset[str] = frozenset(
    {
        "string",
        "template_string",
        "regex",
        "jsx_text",
        "comment",
        "html_comment",
    }
)

Shape = tuple[str, "str | tuple[Shape, ...]"]


class Grammar(str, Enum):
    """tree-sitter grammars available to structured templates."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"


def grammar_for(features: Iterable[Feature]) -> Grammar:
    """Pick the grammar that accepts every requested feature.

    The JavaScript grammar always accepts JSX, so only TypeScript changes the
    choice.
    """
    requested = frozenset(features)
    if Feature.TYPESCRIPT in requested:
        return Grammar.TSX if Feature.JSX in requested else Grammar.TYPESCRIPT
    return Grammar.JAVASCRIPT


@cache
def _language(grammar: Grammar) -> Language:
    if grammar is Grammar.TSX:
        return Language(ts_typescript.language_tsx())
    if grammar is Grammar.TYPESCRIPT:
        return Language(ts_typescript.language_typescript())
    return Language(ts_javascript.language())


@dataclass(frozen=True)
class ParsedSource:
    """A syntax tree together with the exact bytes it was parsed from."""

    grammar: Grammar
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text_of(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8")


def parse_source(text: str, features: Iterable[Feature] = ()) -> ParsedSource:
    """Parse *text* with the grammar selected by *features*.

    Raises:
        SourceSyntaxError: If the tree contains an error or a missing node.
    """
    grammar = grammar_for(features)
    source = text.encode("utf-8")
    tree = Parser(_language(grammar)).parse(source)

    bad = _first_error(tree.root_node)
    if bad is not None:
        row, column = bad.start_point
        problem = f"missing {bad.type!r}" if bad.is_missing else "unexpected syntax"
        raise SourceSyntaxError(f"{grammar.value}: {problem}", row + 1, column + 1)

    return ParsedSource(grammar=grammar, source=source, tree=tree)


def _first_error(node: Node) -> Node | None:
    if not node.has_error:
        return None
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


def _tokens(node: Node) -> Iterator[Node]:
    if node.child_count == 0 or node.type in _VERBATIM_NODES:
        yield node
        return
    for child in node.children:
        yield from _tokens(child)


def _normalize_gap(gap: bytes) -> bytes:
    if gap.strip():
        # text not covered by any token, keep it untouched
        return gap
    if b"\n" not in gap:
        return b" " if gap else b""
    newlines = min(gap.count(b"\n"), 2)
    indent = gap.rsplit(b"\n", 1)[1].replace(b"\r", b"")
    return b"\n" * newlines + indent


def regenerate(parsed: ParsedSource) -> str:
    """Re-emit *parsed* as text with normalised whitespace."""
    if parsed.root.child_count == 0:
        return ""
    tokens = list(_tokens(parsed.root))

    source = parsed.source
    pieces: list[bytes] = []
    cursor = tokens[0].start_byte
    for token in tokens:
        pieces.append(_normalize_gap(source[cursor : token.start_byte]))
        pieces.append(source[token.start_byte : token.end_byte])
        cursor = token.end_byte

    return b"".join(pieces).decode("utf-8") + "\n"


def structure(parsed: ParsedSource) -> Shape:
    """Formatting-independent shape of the tree: node types plus token text."""
    return _shape(parsed, parsed.root)


def _shape(parsed: ParsedSource, node: Node) -> Shape:
    if node.child_count == 0 or node.type in _VERBATIM_NODES:
        return (node.type, parsed.text_of(node))
    return (node.type, tuple(_shape(parsed, child) for child in node.children))
