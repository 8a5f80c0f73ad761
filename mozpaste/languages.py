#!/usr/bin/env python3
"""
Language detection for pasted files.

Maps a file name (never its contents) to one of the lexer tags accepted by
paste.mozilla.org.
"""

import re
from types import MappingProxyType
from typing import Optional

DEFAULT_LANGUAGE = "_code"

SUPPORTED_LANGUAGES = (
    "_text", "_markdown", "_rst", "_code",
    "applescript", "arduino", "bash", "bat", "c", "clojure", "cmake",
    "coffee-script", "common-lisp", "console", "cpp", "csharp", "css", "cuda",
    "dart", "delphi", "diff", "django", "docker", "elixir", "erlang", "go",
    "handlebars", "haskell", "html", "html+django", "ini", "ipythonconsole",
    "irc", "java", "js", "json", "jsx", "kotlin", "less", "lua", "make",
    "matlab", "nginx", "numpy", "objective-c", "perl", "php", "postgresql",
    "python", "rb", "rst", "rust", "sass", "scss", "sol", "sql", "swift",
    "tex", "typoscript", "vim", "xml", "xslt", "yaml",
)

_SUPPORTED = frozenset(SUPPORTED_LANGUAGES)

# Whole file names, checked before anything else
SPECIAL_FILENAMES = MappingProxyType({
    "dockerfile": "docker",
    "makefile": "make",
    "cmakelists.txt": "cmake",
    "nginx.conf": "nginx",
})

EXTENSION_MAP = MappingProxyType({
    "txt": "_text",
    "md": "_markdown",
    "rst": "_rst",
    "sh": "bash",
    "bat": "bat",
    "c": "c",
    "lisp": "common-lisp",
    "lsp": "common-lisp",
    "cl": "common-lisp",
    "cpp": "cpp",
    "cc": "cpp",
    "cxx": "cpp",
    "hpp": "cpp",
    "hxx": "cpp",
    "inc": "cpp",
    "hh": "cpp",
    "h": "cpp",
    "cs": "csharp",
    "cmake": "cmake",
    "in": "cmake",
    "css": "css",
    "dart": "dart",
    "patch": "diff",
    "diff": "diff",
    "elixir": "elixir",
    "ex": "elixir",
    "exs": "elixir",
    "erl": "erlang",
    "go": "go",
    "hbs": "handlebars",
    "hs": "haskell",
    "html": "html",
    "htm": "html",
    "shtm": "html",
    "shtml": "html",
    "ini": "ini",
    "java": "java",
    "js": "js",
    "ts": "js",
    "json": "json",
    "jsonl": "json",
    "tsx": "jsx",
    "jsx": "jsx",
    "kt": "kotlin",
    "kts": "kotlin",
    "lua": "lua",
    "m": "objective-c",
    "mm": "objective-c",
    "pl": "perl",
    "php": "php",
    "py": "python",
    "rb": "rb",
    "rs": "rust",
    "sass": "sass",
    "scss": "scss",
    "sol": "sol",
    "sql": "sql",
    "swift": "swift",
    "tex": "tex",
    "typoscript": "typoscript",
    "vim": "vim",
    "xml": "xml",
    "xsl": "xslt",
    "xslt": "xslt",
    "yml": "yaml",
    "yaml": "yaml",
})

_EXTENSION_RE = re.compile(r"\.([a-z0-9+_-]+)\Z")


def is_supported_language(tag: str) -> bool:
    """Return True if the service accepts ``tag`` as a lexer."""
    return tag in _SUPPORTED


def detect_language(filename: str) -> Optional[str]:
    """
    Guess the lexer tag for a file from its name.

    Special file names win over the ``nginx`` substring rule, which in turn
    wins over the extension table. Matching is case-insensitive.

    Args:
        filename: Base name of the file (no directory part)

    Returns:
        A tag from SUPPORTED_LANGUAGES, or None if nothing matched
    """
    name = filename.lower()

    if name in SPECIAL_FILENAMES:
        return SPECIAL_FILENAMES[name]
    if "nginx" in name:
        return "nginx"

    match = _EXTENSION_RE.search(name)
    if not match:
        return None
    return EXTENSION_MAP.get(match.group(1))


def resolve_language(filename: str, explicit: Optional[str] = None) -> str:
    """
    Pick the lexer for an upload: the explicit tag if given, then the
    detected one, then DEFAULT_LANGUAGE.
    """
    if explicit:
        return explicit
    return detect_language(filename) or DEFAULT_LANGUAGE
