"""Maps stack choices to boilerplate files and writes them to disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from merninit.cli._types import ClientStack, Database, Framework, ServerStack, Styling
from merninit.core import CodeRenderer, TemplateKey


@dataclass(frozen=True)
class FileWrite:
    """One generated file: relative path, template key and whether to append."""

    path: str
    key: TemplateKey
    append: bool = False


# (javascript, typescript)
_DB_INDEX: dict[Database, tuple[TemplateKey, TemplateKey]] = {
    Database.MONGODB: (TemplateKey.SERVER_INDEX_MONGODB, TemplateKey.SERVER_INDEX_MONGODB_TS),
    Database.FIREBASE: (TemplateKey.SERVER_INDEX_FIREBASE, TemplateKey.SERVER_INDEX_FIREBASE_TS),
    Database.SUPABASE: (TemplateKey.SERVER_INDEX_SUPABASE, TemplateKey.SERVER_INDEX_SUPABASE_TS),
    Database.NONE: (TemplateKey.SERVER_INDEX, TemplateKey.SERVER_INDEX),
}

# (javascript, typescript)
_DB_CONFIG: dict[Database, tuple[TemplateKey, TemplateKey]] = {
    Database.MONGODB: (TemplateKey.MONGOOSE_JS, TemplateKey.MONGOOSE_TS),
    Database.FIREBASE: (TemplateKey.FIREBASE_CONFIG, TemplateKey.FIREBASE_CONFIG),
    Database.SUPABASE: (TemplateKey.SUPABASE_CONFIG_JS, TemplateKey.SUPABASE_CONFIG),
}


def _react_files(stack: ClientStack) -> list[FileWrite]:
    ts = stack.language.is_typescript
    ext = "tsx" if ts else "jsx"

    if stack.auth:
        entry = TemplateKey.REACT_CLERK_TS if ts else TemplateKey.REACT_CLERK_JS
        app = TemplateKey.REACT_CLERK_HOME
    else:
        entry = TemplateKey.REACT_ROUTER_TS if ts else TemplateKey.REACT_ROUTER_JS
        app = TemplateKey.HOME_PAGE

    files = [
        FileWrite(f"src/main.{ext}", entry),
        FileWrite(f"src/App.{ext}", app),
        FileWrite("src/App.css", TemplateKey.REACT_APP_CSS),
    ]
    if stack.auth:
        files.append(FileWrite("src/App.css", TemplateKey.REACT_CLERK_CSS, append=True))
    if stack.styling == Styling.TAILWIND:
        vite_config = f"vite.config.{'ts' if ts else 'js'}"
        files.append(FileWrite(vite_config, TemplateKey.TAILWIND_VITE_CONFIG))
        files.append(FileWrite("src/index.css", TemplateKey.TAILWIND_INDEX_CSS))
    return files


def _next_files(stack: ClientStack) -> list[FileWrite]:
    ts = stack.language.is_typescript
    script_ext = "ts" if ts else "js"
    component_ext = "tsx" if ts else "js"

    page = TemplateKey.NEXT_CLERK_PAGE if stack.auth else TemplateKey.NEXT_HOME
    files = [
        FileWrite(f"src/app/page.{component_ext}", page),
        FileWrite("src/app/globals.css", TemplateKey.NEXT_GLOBAL_CSS, append=True),
    ]
    if stack.auth:
        layout = TemplateKey.NEXT_CLERK_LAYOUT if ts else TemplateKey.NEXT_CLERK_LAYOUT_JS
        files += [
            FileWrite(f"src/middleware.{script_ext}", TemplateKey.NEXT_CLERK_MIDDLEWARE),
            FileWrite(f"src/app/layout.{component_ext}", layout),
            FileWrite("src/app/globals.css", TemplateKey.NEXT_CLERK_CSS, append=True),
        ]
    return files


def plan_client(stack: ClientStack) -> list[FileWrite]:
    """Files to overlay on a generated frontend, relative to ``client/``."""
    if stack.framework == Framework.NEXT:
        return _next_files(stack)
    return _react_files(stack)


def plan_server(stack: ServerStack) -> list[FileWrite]:
    """Files to overlay on an initialised Express backend, relative to ``server/``."""
    ts = stack.language.is_typescript
    ext = "ts" if ts else "js"

    files: list[FileWrite] = []
    if ts:
        files += [
            FileWrite("nodemon.json", TemplateKey.NODEMON_JSON),
            FileWrite("tsconfig.json", TemplateKey.TS_CONFIG),
        ]
    js_index, ts_index = _DB_INDEX[stack.database]
    files.append(FileWrite(f"src/index.{ext}", ts_index if ts else js_index))
    if stack.database != Database.NONE:
        js_key, ts_key = _DB_CONFIG[stack.database]
        files.append(FileWrite(f"src/config/db.config.{ext}", ts_key if ts else js_key))
    return files


def render_overlay(target_dir: Path, files: list[FileWrite], renderer: CodeRenderer) -> list[str]:
    """Write *files* under *target_dir*. Returns the relative paths written, in order.

    Every file is rendered before anything is written, so a broken template
    leaves the target untouched.
    """
    if not target_dir.is_dir():
        raise FileNotFoundError(f"Directory '{target_dir}' does not exist.")

    rendered = [(f, renderer.generate(f.key)) for f in files]

    written: list[str] = []
    for f, content in rendered:
        path = target_dir / f.path
        path.parent.mkdir(parents=True, exist_ok=True)
        if f.append:
            with path.open("a", encoding="utf-8") as fh:
                fh.write(content)
        else:
            path.write_text(content, encoding="utf-8")
        if f.path not in written:
            written.append(f.path)
    return written
