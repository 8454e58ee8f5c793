"""Typer CLI application for merninit."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from typer import Argument, Exit, Option, Typer, echo

import merninit
from merninit.cli._renderer import FileWrite, plan_client, plan_server, render_overlay
from merninit.cli._types import ClientStack, Database, Framework, Language, ServerStack, Styling
from merninit.core import (
    TEMPLATES,
    CodeRenderer,
    TemplateError,
    TemplateKey,
    TemplateNotFound,
    TemplateParseError,
)

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("merninit")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=_err_console, show_path=False))


@app.callback()
def main(
    verbose: Annotated[
        bool, Option("--verbose", "-v", help="Log template parsing and cache activity.")
    ] = False,
) -> None:
    """merninit: boilerplate overlays for MERN starter projects."""
    _configure_logging(verbose)


def _error(message: str) -> None:
    _console.print(f"[bold red]Error:[/] {message}")


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for key in TemplateKey:
        template = TEMPLATES.lookup(key)
        features = ", ".join(sorted(f.value for f in template.features)) or "-"
        _console.print(
            f"[dim]│[/]  [bold cyan]{key.value:<24}[/] "
            f"[bold]{template.kind.value:<10}[/] [dim]{features}[/]"
        )
        _console.print(f"[dim]│[/]  {' ' * 24} [dim]{key.description}[/]")
    _console.print("[dim]│[/]")
    _console.print()


@app.command()
def templates() -> None:
    """List every registered template."""
    _print_templates()


@app.command()
def render(
    key: Annotated[str, Argument(help="Template key. Run `merninit templates` to see all keys.")],
    output: Annotated[
        Path | None,
        Option("--output", "-o", help="Write to this file instead of stdout.", show_default=False),
    ] = None,
) -> None:
    """Print the generated text of a single template."""
    renderer = CodeRenderer()
    try:
        text = renderer.generate(key)
    except TemplateNotFound:
        valid = ", ".join(f"'{k.value}'" for k in TemplateKey)
        _console.print()
        _error(f"[bold]{key!r}[/] is not a registered template.")
        _console.print(f"[dim]Valid values:[/] {valid}")
        raise Exit(code=2) from None
    except TemplateParseError as exc:
        _error(str(exc))
        raise Exit(code=1) from None

    if output is None:
        echo(text, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        _error(f"Could not write '{output}': {exc.strerror or exc}")
        raise Exit(code=1) from None
    _console.print(f"[bold green]◇[/]  Wrote {key} to {output}")


@app.command()
def check() -> None:
    """Parse and regenerate every structured template."""
    renderer = CodeRenderer()
    try:
        rendered = renderer.warm()
    except TemplateParseError as exc:
        _error(str(exc))
        raise Exit(code=1) from None

    _console.print(f"[bold green]◇[/]  {len(rendered)} structured templates parse cleanly")


def _print_choice(title: str, labels: list[str]) -> None:
    _console.print(f"[bold green]◇[/]  {title}")
    _console.print(f"[dim]│[/]  {' · '.join(labels)}")
    _console.print("[dim]│[/]")


@app.command()
def apply(
    project_dir: Annotated[
        Path, Argument(help="Project holding client/ and server/ from the upstream generators")
    ],
    client: Annotated[
        bool, Option("--client/--no-client", help="Overlay the frontend in client/")
    ] = True,
    framework: Annotated[
        Framework, Option("--framework", "-f", help="Frontend framework")
    ] = Framework.REACT,
    language: Annotated[
        Language, Option("--language", "-l", help="Frontend language")
    ] = Language.JAVASCRIPT,
    styling: Annotated[Styling, Option("--css", help="CSS approach")] = Styling.TAILWIND,
    auth: Annotated[bool, Option("--auth/--no-auth", help="Wire in Clerk authentication")] = False,
    server: Annotated[
        bool, Option("--server/--no-server", help="Overlay the backend in server/")
    ] = True,
    server_language: Annotated[
        Language, Option("--server-language", "-s", help="Backend language")
    ] = Language.JAVASCRIPT,
    database: Annotated[
        Database, Option("--database", "-d", help="Backend database")
    ] = Database.MONGODB,
) -> None:
    """Overwrite generated starter files with merninit boilerplate."""
    if not project_dir.is_dir():
        _error(f"Directory '{project_dir}' does not exist.")
        raise Exit(code=1)

    parts: list[tuple[str, list[FileWrite]]] = []
    if client:
        client_stack = ClientStack(
            framework=framework, language=language, styling=styling, auth=auth
        )
        parts.append(("client", plan_client(client_stack)))
    if server:
        server_stack = ServerStack(language=server_language, database=database)
        parts.append(("server", plan_server(server_stack)))

    if not parts:
        _console.print("[bold yellow]Nothing to do:[/] both --no-client and --no-server given.")
        return

    missing = [folder for folder, _ in parts if not (project_dir / folder).is_dir()]
    if missing:
        names = ", ".join(f"'{folder}/'" for folder in missing)
        _error(f"{names} not found in '{project_dir}'. Run the project generators first.")
        raise Exit(code=1)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  merninit v{merninit.__version__}")
    _console.print("[dim]│[/]")

    if client:
        client_labels = [framework.label, language.label, styling.label]
        if auth:
            client_labels.append("Clerk")
        _print_choice("Frontend", client_labels)
    if server:
        _print_choice("Backend", ["Express", server_language.label, database.label])

    renderer = CodeRenderer()
    try:
        # render everything up front so a broken template writes nothing
        for _, files in parts:
            for f in files:
                renderer.generate(f.key)
    except TemplateError as exc:
        _error(str(exc))
        raise Exit(code=1) from None

    for folder, files in parts:
        _console.print(f"[bold green]◇[/]  Writing {folder}/...")
        for name in render_overlay(project_dir / folder, files, renderer):
            _console.print(f"[dim]│[/]  {folder}/{name}")
        _console.print("[dim]│[/]")

    _console.print(f"[bold cyan]●[/]  Done! cd {project_dir} and run npm run dev in each folder")
    _console.print()
