"""Boilerplate templates shipped with merninit.

Template bodies live as package data under ``merninit/core/scaffold/`` and are
read once, when this module is imported.
"""

from __future__ import annotations

import importlib.resources as ilr
from enum import Enum

from merninit.core.store import Feature, Template, TemplateStore

JSX = Feature.JSX
TS = Feature.TYPESCRIPT


class TemplateKey(str, Enum):
    """Identifiers of every shipped template."""

    REACT_ROUTER_JS = "react-router-js"
    REACT_ROUTER_TS = "react-router-ts"
    HOME_PAGE = "home-page"
    TAILWIND_VITE_CONFIG = "tailwind-vite-config"
    TAILWIND_INDEX_CSS = "tailwind-index-css"
    REACT_CLERK_JS = "react-clerk-js"
    REACT_CLERK_TS = "react-clerk-ts"
    REACT_CLERK_HOME = "react-clerk-home"
    REACT_APP_CSS = "react-app-css"
    REACT_CLERK_CSS = "react-clerk-css"
    NEXT_HOME = "next-home"
    NEXT_CLERK_MIDDLEWARE = "next-clerk-middleware"
    NEXT_CLERK_LAYOUT = "next-clerk-layout"
    NEXT_CLERK_LAYOUT_JS = "next-clerk-layout-js"
    NEXT_CLERK_PAGE = "next-clerk-page"
    NEXT_GLOBAL_CSS = "next-global-css"
    NEXT_CLERK_CSS = "next-clerk-css"
    SERVER_INDEX = "server-index"
    SERVER_INDEX_MONGODB = "server-index-mongodb"
    SERVER_INDEX_FIREBASE = "server-index-firebase"
    SERVER_INDEX_SUPABASE = "server-index-supabase"
    SERVER_INDEX_MONGODB_TS = "server-index-mongodb-ts"
    SERVER_INDEX_FIREBASE_TS = "server-index-firebase-ts"
    SERVER_INDEX_SUPABASE_TS = "server-index-supabase-ts"
    MONGOOSE_JS = "mongoose-js"
    MONGOOSE_TS = "mongoose-ts"
    FIREBASE_CONFIG = "firebase-config"
    SUPABASE_CONFIG = "supabase-config"
    SUPABASE_CONFIG_JS = "supabase-config-js"
    NODEMON_JSON = "nodemon-json"
    TS_CONFIG = "ts-config"

    @property
    def description(self) -> str:
        descriptions: dict[TemplateKey, str] = {
            TemplateKey.REACT_ROUTER_JS: "React entry point wrapped in BrowserRouter (JavaScript).",
            TemplateKey.REACT_ROUTER_TS: "React entry point wrapped in BrowserRouter (TypeScript).",
            TemplateKey.HOME_PAGE: "React App component with a single home route.",
            TemplateKey.TAILWIND_VITE_CONFIG: "Vite config with the React and Tailwind plugins.",
            TemplateKey.TAILWIND_INDEX_CSS: "Stylesheet importing Tailwind.",
            TemplateKey.REACT_CLERK_JS: "React entry point with ClerkProvider (JavaScript).",
            TemplateKey.REACT_CLERK_TS: "React entry point with ClerkProvider (TypeScript).",
            TemplateKey.REACT_CLERK_HOME: "React App component with Clerk sign-in header.",
            TemplateKey.REACT_APP_CSS: "Dark landing page stylesheet for React.",
            TemplateKey.REACT_CLERK_CSS: "Header styles for the Clerk sign-in buttons (React).",
            TemplateKey.NEXT_HOME: "Next.js landing page.",
            TemplateKey.NEXT_CLERK_MIDDLEWARE: "Next.js middleware running clerkMiddleware.",
            TemplateKey.NEXT_CLERK_LAYOUT: "Next.js root layout with ClerkProvider (TypeScript).",
            TemplateKey.NEXT_CLERK_LAYOUT_JS: "Next.js root layout with ClerkProvider (JavaScript).",  # noqa: E501
            TemplateKey.NEXT_CLERK_PAGE: "Next.js landing page with Clerk sign-in header.",
            TemplateKey.NEXT_GLOBAL_CSS: "Landing page styles appended to globals.css.",
            TemplateKey.NEXT_CLERK_CSS: "Header styles for the Clerk sign-in buttons (Next.js).",
            TemplateKey.SERVER_INDEX: "Express server entry point without a database.",
            TemplateKey.SERVER_INDEX_MONGODB: "Express server entry point connecting to MongoDB.",
            TemplateKey.SERVER_INDEX_FIREBASE: "Express server entry point exposing Firestore.",
            TemplateKey.SERVER_INDEX_SUPABASE: "Express server entry point exposing Supabase.",
            TemplateKey.SERVER_INDEX_MONGODB_TS: "Express server entry point connecting to MongoDB (TypeScript).",  # noqa: E501
            TemplateKey.SERVER_INDEX_FIREBASE_TS: "Express server entry point exposing Firestore (TypeScript).",  # noqa: E501
            TemplateKey.SERVER_INDEX_SUPABASE_TS: "Express server entry point exposing Supabase (TypeScript).",  # noqa: E501
            TemplateKey.MONGOOSE_JS: "Mongoose connection helper (JavaScript).",
            TemplateKey.MONGOOSE_TS: "Mongoose connection helper (TypeScript).",
            TemplateKey.FIREBASE_CONFIG: "firebase-admin initialisation returning Firestore.",
            TemplateKey.SUPABASE_CONFIG: "Supabase client factory (TypeScript).",
            TemplateKey.SUPABASE_CONFIG_JS: "Supabase client factory (JavaScript).",
            TemplateKey.NODEMON_JSON: "nodemon config running src/index.ts through ts-node.",
            TemplateKey.TS_CONFIG: "tsconfig.json for the Express server.",
        }
        return descriptions[self]


def _read(area: str, filename: str) -> str:
    resource = ilr.files("merninit.core").joinpath("scaffold").joinpath(area).joinpath(filename)
    return resource.read_text(encoding="utf-8")


def _structured(area: str, filename: str, *features: Feature) -> Template:
    return Template.structured(_read(area, filename), *features)


def _literal(area: str, filename: str) -> Template:
    return Template.literal(_read(area, filename))


TEMPLATES = TemplateStore(
    [
        # React
        (TemplateKey.REACT_ROUTER_JS, _structured("react", "main_router.jsx", JSX)),
        (TemplateKey.REACT_ROUTER_TS, _structured("react", "main_router.tsx", JSX, TS)),
        (TemplateKey.HOME_PAGE, _structured("react", "App.tsx", JSX, TS)),
        (TemplateKey.TAILWIND_VITE_CONFIG, _structured("react", "vite.config.ts", JSX, TS)),
        (TemplateKey.TAILWIND_INDEX_CSS, _literal("react", "index.css")),
        (TemplateKey.REACT_CLERK_JS, _structured("react", "main_clerk.jsx", JSX)),
        (TemplateKey.REACT_CLERK_TS, _structured("react", "main_clerk.tsx", JSX, TS)),
        (TemplateKey.REACT_CLERK_HOME, _structured("react", "App_clerk.tsx", JSX, TS)),
        (TemplateKey.REACT_APP_CSS, _literal("react", "App.css")),
        (TemplateKey.REACT_CLERK_CSS, _literal("react", "App_clerk.css")),
        # Next.js
        (TemplateKey.NEXT_HOME, _structured("next", "page.tsx", JSX, TS)),
        (TemplateKey.NEXT_CLERK_MIDDLEWARE, _structured("next", "middleware.ts", JSX, TS)),
        (TemplateKey.NEXT_CLERK_LAYOUT, _structured("next", "layout.tsx", JSX, TS)),
        (TemplateKey.NEXT_CLERK_LAYOUT_JS, _structured("next", "layout.js", JSX)),
        (TemplateKey.NEXT_CLERK_PAGE, _structured("next", "page_clerk.tsx", JSX, TS)),
        (TemplateKey.NEXT_GLOBAL_CSS, _literal("next", "globals.css")),
        (TemplateKey.NEXT_CLERK_CSS, _literal("next", "globals_clerk.css")),
        # Express
        (TemplateKey.SERVER_INDEX, _structured("server", "index.js")),
        (TemplateKey.SERVER_INDEX_MONGODB, _structured("server", "index_mongodb.js")),
        (TemplateKey.SERVER_INDEX_FIREBASE, _structured("server", "index_firebase.js")),
        (TemplateKey.SERVER_INDEX_SUPABASE, _structured("server", "index_supabase.js")),
        (TemplateKey.SERVER_INDEX_MONGODB_TS, _structured("server", "index_mongodb.ts", TS)),
        (TemplateKey.SERVER_INDEX_FIREBASE_TS, _structured("server", "index_firebase.ts", TS)),
        (TemplateKey.SERVER_INDEX_SUPABASE_TS, _structured("server", "index_supabase.ts", TS)),
        (TemplateKey.MONGOOSE_JS, _structured("server", "mongoose.js")),
        (TemplateKey.MONGOOSE_TS, _structured("server", "mongoose.ts", TS)),
        (TemplateKey.FIREBASE_CONFIG, _structured("server", "firebase.ts", TS)),
        (TemplateKey.SUPABASE_CONFIG, _structured("server", "supabase.ts", TS)),
        (TemplateKey.SUPABASE_CONFIG_JS, _structured("server", "supabase.js")),
        (TemplateKey.NODEMON_JSON, _literal("server", "nodemon.json")),
        (TemplateKey.TS_CONFIG, _literal("server", "tsconfig.json")),
    ]
)
