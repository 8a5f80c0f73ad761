#!/usr/bin/env python3
"""Tests for language detection from file names."""

import os
import sys
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from mozpaste.languages import (
    DEFAULT_LANGUAGE,
    EXTENSION_MAP,
    SPECIAL_FILENAMES,
    SUPPORTED_LANGUAGES,
    detect_language,
    is_supported_language,
    resolve_language,
)


class TestSupportedLanguages:
    """Tests for the closed set of lexer tags."""

    def test_size(self):
        """Should hold 63 unique tags."""
        assert len(SUPPORTED_LANGUAGES) == 63
        assert len(set(SUPPORTED_LANGUAGES)) == 63

    def test_meta_tags(self):
        """Should include the four meta tags."""
        for tag in ("_text", "_markdown", "_rst", "_code"):
            assert is_supported_language(tag)

    def test_unknown_tag(self):
        """Should reject tags outside the set, case-sensitively."""
        assert not is_supported_language("brainfuck")
        assert not is_supported_language("Python")
        assert not is_supported_language("")

    def test_every_detectable_tag_is_supported(self):
        """Detection should never produce a tag the service rejects."""
        for tag in list(EXTENSION_MAP.values()) + list(SPECIAL_FILENAMES.values()):
            assert is_supported_language(tag), tag


class TestSpecialFilenames:
    """Tests for whole-name matches."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("Dockerfile", "docker"),
            ("DOCKERFILE", "docker"),
            ("makefile", "make"),
            ("Makefile", "make"),
            ("CMakeLists.txt", "cmake"),
            ("cmakelists.TXT", "cmake"),
            ("nginx.conf", "nginx"),
            ("NGINX.CONF", "nginx"),
        ],
    )
    def test_special_names(self, filename, expected):
        assert detect_language(filename) == expected

    def test_special_name_beats_extension(self):
        """CMakeLists.txt should not be classified as plain text."""
        assert detect_language("CMakeLists.txt") != "_text"

    def test_special_name_must_match_whole(self):
        """A prefix of a special name is not special."""
        assert detect_language("Dockerfile.dev") is None
        assert detect_language("makefile.txt") == "_text"


class TestNginxSubstring:
    """Tests for the nginx substring rule."""

    def test_overrides_extension(self):
        """Should win over the extension table."""
        assert detect_language("my_nginx_service.yaml") == "nginx"
        assert detect_language("my-nginx-test.conf") == "nginx"

    def test_case_insensitive(self):
        assert detect_language("Site-NGINX.txt") == "nginx"

    def test_without_extension(self):
        assert detect_language("nginx") == "nginx"


class TestExtensions:
    """Tests for extension based detection."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("main.rs", "rust"),
            ("Main.RS", "rust"),
            ("notes.py", "python"),
            ("app.ts", "js"),
            ("app.js", "js"),
            ("view.tsx", "jsx"),
            ("view.jsx", "jsx"),
            ("vector.h", "cpp"),
            ("vector.hpp", "cpp"),
            ("defs.inc", "cpp"),
            ("config.yml", "yaml"),
            ("config.YAML", "yaml"),
            ("notes.txt", "_text"),
            ("README.md", "_markdown"),
            ("index.rst", "_rst"),
            ("config.h.in", "cmake"),
            ("fix.patch", "diff"),
            ("script.sh", "bash"),
            ("lib.exs", "elixir"),
            ("page.shtml", "html"),
            ("events.jsonl", "json"),
            ("AppDelegate.mm", "objective-c"),
            ("transform.xsl", "xslt"),
        ],
    )
    def test_known_extensions(self, filename, expected):
        assert detect_language(filename) == expected

    def test_whole_table(self):
        """Every table entry should be reachable, in either case."""
        for ext, tag in EXTENSION_MAP.items():
            assert detect_language(f"file.{ext}") == tag
            assert detect_language(f"FILE.{ext.upper()}") == tag

    def test_only_last_suffix_counts(self):
        """archive.tar.gz resolves through 'gz', which is unknown."""
        assert detect_language("archive.tar.gz") is None
        assert detect_language("module.test.py") == "python"


class TestNoMatch:
    """Tests for names that classify as nothing."""

    @pytest.mark.parametrize(
        "filename",
        ["README", "LICENSE", "", "trailing.", "photo.png", "archive.tar.gz", "weird.c#"],
    )
    def test_returns_none(self, filename):
        assert detect_language(filename) is None

    def test_trailing_newline_is_not_an_extension(self):
        """The extension must end the name, not precede a line break."""
        assert detect_language("a.py\n") is None
        assert detect_language("notes.txt\n") is None

    def test_dotfile_uses_name_as_extension(self):
        """'.bashrc' has extension 'bashrc', which is not in the table."""
        assert detect_language(".bashrc") is None
        assert detect_language(".md") == "_markdown"


class TestPurity:
    """Detection should be deterministic."""

    def test_repeated_calls(self):
        names = ["a.py", "Dockerfile", "README", "nginx.yaml", "x.rs"]
        first = [detect_language(name) for name in names]
        second = [detect_language(name) for name in reversed(names)]
        assert first == list(reversed(second))


class TestResolveLanguage:
    """Tests for the explicit -> detected -> default fallback."""

    def test_explicit_wins(self):
        assert resolve_language("main.rs", "python") == "python"

    def test_detected(self):
        assert resolve_language("main.rs") == "rust"

    def test_default(self):
        assert resolve_language("README") == DEFAULT_LANGUAGE == "_code"
