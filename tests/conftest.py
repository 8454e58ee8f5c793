"""Shared fixtures for the merninit test suite."""

from pathlib import Path

import pytest

from merninit.core import CodeRenderer, Feature, Template, TemplateStore

MARKUP = 'const el = <div className="greeting">Hello</div>;\n'


@pytest.fixture
def small_store() -> TemplateStore:
    return TemplateStore(
        [
            ("greeting", Template.literal("hello")),
            ("comp", Template.structured(MARKUP, Feature.JSX)),
            ("typed", Template.structured("let n: number = 1;\n", Feature.TYPESCRIPT)),
            ("broken", Template.structured("const = ;\n")),
        ]
    )


@pytest.fixture
def renderer() -> CodeRenderer:
    return CodeRenderer()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project as left by the upstream generators: empty client/ and server/."""
    root = tmp_path / "my-app"
    (root / "client").mkdir(parents=True)
    (root / "server").mkdir()
    return root
