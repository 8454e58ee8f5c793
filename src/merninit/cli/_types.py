"""Enums and stack descriptions for CLI options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Framework(str, Enum):
    """Frontend framework."""

    REACT = "react"
    NEXT = "next"

    @property
    def label(self) -> str:
        labels: dict[Framework, str] = {
            Framework.REACT: "React (Vite)",
            Framework.NEXT: "Next.js",
        }
        return labels[self]


class Language(str, Enum):
    """Source language of the client or the server."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        labels: dict[Language, str] = {
            Language.JAVASCRIPT: "JavaScript",
            Language.TYPESCRIPT: "TypeScript",
        }
        return labels[self]

    @property
    def is_typescript(self) -> bool:
        return self is Language.TYPESCRIPT


class Styling(str, Enum):
    """CSS approach."""

    TAILWIND = "tailwind"
    VANILLA = "vanilla"

    @property
    def label(self) -> str:
        labels: dict[Styling, str] = {
            Styling.TAILWIND: "TailwindCSS",
            Styling.VANILLA: "Vanilla CSS",
        }
        return labels[self]


class Database(str, Enum):
    """Backend database."""

    MONGODB = "mongodb"
    FIREBASE = "firebase"
    SUPABASE = "supabase"
    NONE = "none"

    @property
    def label(self) -> str:
        labels: dict[Database, str] = {
            Database.MONGODB: "MongoDB (mongoose)",
            Database.FIREBASE: "Firebase (firebase-admin)",
            Database.SUPABASE: "Supabase",
            Database.NONE: "No database",
        }
        return labels[self]


@dataclass(frozen=True, kw_only=True)
class ClientStack:
    """
    Choices for the frontend under ``client/``.

    Attributes:
        framework: React (Vite) or Next.js.
        language: JavaScript or TypeScript.
        styling: TailwindCSS or plain CSS.
        auth: Whether Clerk authentication is wired in.
    """

    framework: Framework = Framework.REACT
    language: Language = Language.JAVASCRIPT
    styling: Styling = Styling.TAILWIND
    auth: bool = False


@dataclass(frozen=True, kw_only=True)
class ServerStack:
    """Choices for the Express backend under ``server/``."""

    language: Language = Language.JAVASCRIPT
    database: Database = Database.MONGODB
