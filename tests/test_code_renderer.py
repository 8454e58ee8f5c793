"""Unit tests for the code renderer and its render cache."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from merninit.core import (
    TEMPLATES,
    CodeRenderer,
    SourceSyntaxError,
    TemplateKey,
    TemplateKind,
    TemplateNotFound,
    TemplateParseError,
    TemplateStore,
)
from merninit.core.syntax import parse_source, regenerate, structure


@pytest.fixture
def counting_parser() -> MagicMock:
    return MagicMock(wraps=parse_source)


class TestGenerate:
    def test_greeting_literal(self, small_store: TemplateStore) -> None:
        renderer = CodeRenderer(small_store)
        assert renderer.generate("greeting") == "hello"

    def test_structured_parsed_once(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        renderer = CodeRenderer(small_store, parser=counting_parser)

        first = renderer.generate("comp")
        second = renderer.generate("comp")

        assert first == second
        assert counting_parser.call_count == 1

    def test_structured_many_calls(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        renderer = CodeRenderer(small_store, parser=counting_parser)
        results = {renderer.generate("comp") for _ in range(10)}
        assert len(results) == 1
        assert counting_parser.call_count == 1

    def test_parser_receives_declared_features(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        renderer = CodeRenderer(small_store, parser=counting_parser)
        renderer.generate("typed")

        body, features = counting_parser.call_args.args
        assert body == small_store.lookup("typed").body
        assert features == small_store.lookup("typed").features

    def test_literal_not_parsed(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        renderer = CodeRenderer(small_store, parser=counting_parser)
        renderer.generate("greeting")
        renderer.generate("greeting")
        counting_parser.assert_not_called()
        assert not renderer.is_cached("greeting")

    def test_unknown_key(self, small_store: TemplateStore) -> None:
        renderer = CodeRenderer(small_store)
        with pytest.raises(TemplateNotFound) as exc_info:
            renderer.generate("does-not-exist")
        assert exc_info.value.key == "does-not-exist"

    def test_unknown_key_in_shipped_catalog(self, renderer: CodeRenderer) -> None:
        with pytest.raises(TemplateNotFound):
            renderer.generate("reactRouerJS")

    def test_parse_failure(self, small_store: TemplateStore) -> None:
        renderer = CodeRenderer(small_store)
        with pytest.raises(TemplateParseError) as exc_info:
            renderer.generate("broken")

        err = exc_info.value
        assert err.key == "broken"
        assert isinstance(err.cause, SourceSyntaxError)
        assert err.__cause__ is err.cause
        assert not renderer.is_cached("broken")

    def test_parse_failure_is_not_memoised(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        renderer = CodeRenderer(small_store, parser=counting_parser)
        for _ in range(2):
            with pytest.raises(TemplateParseError):
                renderer.generate("broken")
        assert counting_parser.call_count == 2

    def test_accepts_enum_keys(self, renderer: CodeRenderer) -> None:
        assert renderer.generate(TemplateKey.HOME_PAGE) == renderer.generate("home-page")
        assert renderer.is_cached(TemplateKey.HOME_PAGE)

    def test_caches_are_per_instance(
        self, small_store: TemplateStore, counting_parser: MagicMock
    ) -> None:
        a = CodeRenderer(small_store, parser=counting_parser)
        b = CodeRenderer(small_store, parser=counting_parser)
        assert a.generate("comp") == b.generate("comp")
        assert counting_parser.call_count == 2


class TestParsed:
    def test_returns_cached_tree(self, small_store: TemplateStore) -> None:
        renderer = CodeRenderer(small_store)
        tree = renderer.parsed("comp")
        assert renderer.is_cached("comp")
        assert renderer.parsed("comp") is tree
        assert regenerate(tree) == renderer.generate("comp")

    def test_literal_has_no_tree(self, small_store: TemplateStore) -> None:
        with pytest.raises(ValueError, match="literal"):
            CodeRenderer(small_store).parsed("greeting")


class TestWarm:
    def test_renders_structured_only(self, counting_parser: MagicMock) -> None:
        renderer = CodeRenderer(parser=counting_parser)
        keys = renderer.warm()

        structured = [k for k in TEMPLATES if TEMPLATES[k].kind is TemplateKind.STRUCTURED]
        assert keys == structured
        assert counting_parser.call_count == len(structured)
        assert all(renderer.is_cached(k) for k in structured)

    def test_surfaces_broken_template(self, small_store: TemplateStore) -> None:
        with pytest.raises(TemplateParseError, match="broken"):
            CodeRenderer(small_store).warm()


class TestShippedTemplates:
    @pytest.mark.parametrize("key", list(TemplateKey))
    def test_idempotent(self, key: TemplateKey) -> None:
        renderer = CodeRenderer()
        assert renderer.generate(key) == renderer.generate(key)
        assert renderer.generate(key) == CodeRenderer().generate(key)

    @pytest.mark.parametrize(
        "key", [k for k in TemplateKey if TEMPLATES[k.value].kind is TemplateKind.LITERAL]
    )
    def test_literal_pass_through(self, renderer: CodeRenderer, key: TemplateKey) -> None:
        assert renderer.generate(key) == TEMPLATES.lookup(key).body

    @pytest.mark.parametrize(
        "key", [k for k in TemplateKey if TEMPLATES[k.value].kind is TemplateKind.STRUCTURED]
    )
    def test_round_trip_is_stable(self, renderer: CodeRenderer, key: TemplateKey) -> None:
        features = TEMPLATES.lookup(key).features
        text = renderer.generate(key)
        reparsed = parse_source(text, features)

        assert structure(reparsed) == structure(renderer.parsed(key))
        assert regenerate(reparsed) == text
