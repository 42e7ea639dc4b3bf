"""Tests for code block and front matter span handling."""

from __future__ import annotations

from mdlocale.markdown.spans import (
    extract_code_blocks,
    placeholder,
    restore_code_blocks,
    split_front_matter,
)


class TestExtractCodeBlocks:
    def test_no_code_blocks(self):
        working, spans = extract_code_blocks("Just prose.")
        assert working == "Just prose."
        assert spans == []

    def test_two_blocks_in_order(self):
        content = "A\n```py\nx = 1\n```\nB\n```\ny\n```\nC"
        working, spans = extract_code_blocks(content)

        assert working == "A\n__CODE_BLOCK_0__\nB\n__CODE_BLOCK_1__\nC"
        assert spans == ["```py\nx = 1\n```", "```\ny\n```"]

    def test_unclosed_fence_is_left_alone(self):
        content = "Text\n```\nnever closed"
        working, spans = extract_code_blocks(content)
        assert working == content
        assert spans == []

    def test_placeholder_format(self):
        assert placeholder(3) == "__CODE_BLOCK_3__"


class TestRestoreCodeBlocks:
    def test_round_trip_identity(self):
        content = "# Title\n\n```bash\nls -la\n```\n\nText with `inline`.\n\n```\nmore\n```\n"
        working, spans = extract_code_blocks(content)
        assert restore_code_blocks(working, spans) == content

    def test_restores_into_translated_text(self):
        working, spans = extract_code_blocks("Hello\n```\ncode\n```")
        translated = working.replace("Hello", "Hola")
        assert restore_code_blocks(translated, spans) == "Hola\n```\ncode\n```"

    def test_missing_placeholder_is_skipped(self):
        spans = ["```\na\n```", "```\nb\n```"]
        restored = restore_code_blocks("only __CODE_BLOCK_1__ survived", spans)
        assert restored == "only ```\nb\n``` survived"

    def test_only_first_duplicate_replaced(self):
        spans = ["```\na\n```"]
        restored = restore_code_blocks("__CODE_BLOCK_0__ __CODE_BLOCK_0__", spans)
        assert restored == "```\na\n``` __CODE_BLOCK_0__"

    def test_index_ten_not_confused_with_one(self):
        spans = [f"```\n{i}\n```" for i in range(11)]
        working = " ".join(placeholder(i) for i in range(11))
        restored = restore_code_blocks(working, spans)
        assert restored == " ".join(spans)


class TestSplitFrontMatter:
    def test_front_matter(self):
        content = "---\ntitle: Guide\n---\n# Body\n"
        front_matter, body = split_front_matter(content)
        assert front_matter == "---\ntitle: Guide\n---\n"
        assert body == "# Body\n"

    def test_no_front_matter(self):
        assert split_front_matter("# Body\n---\n") == ("", "# Body\n---\n")

    def test_front_matter_must_start_document(self):
        content = "\n---\ntitle: x\n---\n"
        assert split_front_matter(content) == ("", content)

    def test_empty_front_matter(self):
        assert split_front_matter("---\n---\nBody") == ("---\n---\n", "Body")

    def test_front_matter_only(self):
        assert split_front_matter("---\na: 1\n---") == ("---\na: 1\n---", "")
