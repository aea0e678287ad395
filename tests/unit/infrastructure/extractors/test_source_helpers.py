"""Tests for extractors/_source.py."""

from pathlib import Path

import pytest

from structcheck.domain.exceptions import ExtractionError
from structcheck.infrastructure.extractors._source import (
    line_of,
    mask_comments,
    normalize_dotted,
    read_source,
)


class TestMaskComments:
    """Tests for mask_comments."""

    def test_keeps_length_and_newlines(self) -> None:
        source = "a // x\n/* y\nz */ b\n\"s\" c"

        masked = mask_comments(source)

        assert len(masked) == len(source)
        assert masked.count("\n") == source.count("\n")

    def test_line_comment(self) -> None:
        assert mask_comments("import a.B // import c.D").strip() == "import a.B"

    def test_block_comment_across_lines(self) -> None:
        masked = mask_comments("/*\nimport a.B\n*/\nimport c.D")

        assert "a.B" not in masked
        assert masked.splitlines()[3] == "import c.D"

    def test_nested_block_comment(self) -> None:
        source = "/* outer /* inner */ still comment */ import a.B"

        assert mask_comments(source, nested_comments=True).strip() == "import a.B"
        assert "still" in mask_comments(source, nested_comments=False)

    def test_strings_masked(self) -> None:
        masked = mask_comments('val s = "// not a comment" + \'/\'\nimport a.B')

        assert masked.splitlines()[1] == "import a.B"
        assert "not a comment" not in masked

    def test_escaped_quote(self) -> None:
        masked = mask_comments('"a \\" /* b" x')
        assert masked.endswith(" x")

    def test_raw_string(self) -> None:
        masked = mask_comments('val q = """\nimport fake.Thing\n"""\nimport real.Thing')

        assert "fake" not in masked
        assert "import real.Thing" in masked

    def test_unterminated_comment_masks_rest(self) -> None:
        assert mask_comments("a /* b\nc").strip() == "a"

    def test_template_with_quotes(self) -> None:
        source = 'val s = "${f("//")}"; val t = 1\nimport a.B'

        masked = mask_comments(source, string_templates=True)

        assert masked.splitlines()[0].endswith("; val t = 1")
        assert "f(" not in masked
        assert masked.splitlines()[1] == "import a.B"

    def test_template_ignored_without_flag(self) -> None:
        source = 'val s = "${f("//")}"; val t = 1'

        assert "val t" not in mask_comments(source)

    def test_template_nested_braces(self) -> None:
        masked = mask_comments('"${mapOf(1 to "}").size}" + x', string_templates=True)

        assert masked.strip() == "+ x"

    def test_template_in_raw_string(self) -> None:
        masked = mask_comments('"""${"\\"\\"\\""}""" + y', string_templates=True)

        assert masked.strip() == "+ y"


class TestHelpers:
    """Tests for small helpers."""

    def test_line_of(self) -> None:
        text = "a\nb\nc"
        assert line_of(text, 0) == 1
        assert line_of(text, text.index("c")) == 3

    def test_normalize_dotted(self) -> None:
        assert normalize_dotted("com . example.`in` .Thing") == "com.example.in.Thing"

    def test_read_source(self, tmp_path: Path) -> None:
        path = tmp_path / "A.kt"
        path.write_text("package a", encoding="utf-8")
        assert read_source(path) == "package a"

    def test_read_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="file not found"):
            read_source(tmp_path / "missing.kt")

    def test_read_invalid_encoding_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "A.kt"
        path.write_bytes(b"\xff\xfe\xfa")

        with pytest.raises(ExtractionError, match="encoding error"):
            read_source(path)
