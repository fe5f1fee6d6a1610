"""Tests for easy_cli.core.scanner — locating tag lines in script text."""

from __future__ import annotations

import pytest

from easy_cli.core.models import ArgType, CommandArgument, CommandOption
from easy_cli.core.scanner import iter_tags, scan_line, scan_tags
from easy_cli.core.tags import AboutTag, ArgTag, IgnoreTag, NameTag, OptTag, SubTag


# ---------------------------------------------------------------------------
# Single lines
# ---------------------------------------------------------------------------

class TestScanLine:
    def test_about_tag(self) -> None:
        assert scan_line("# @about This is a description") == AboutTag("This is a description")

    @pytest.mark.parametrize(
        "line",
        [
            "@about This is a description",
            "# This is a description",
            "This is a description",
            "#!/usr/bin/env zsh",
            "",
            "echo '# @about not a comment'",
        ],
    )
    def test_non_tag_lines(self, line: str) -> None:
        assert scan_line(line) is None

    @pytest.mark.parametrize(
        "line",
        [
            "#@name foo",
            "# @name foo",
            "#\t@name foo",
            "    #   @name foo",
            "\t# @name foo",
        ],
    )
    def test_blanks_around_comment_char(self, line: str) -> None:
        assert scan_line(line) == NameTag("foo")

    def test_keyword_stops_at_hyphen(self) -> None:
        assert scan_line("# @ignore-at-root") == IgnoreTag()

    def test_unknown_keyword_is_dropped(self) -> None:
        assert scan_line("# @wrong sdlklak") is None

    @pytest.mark.parametrize("line", ["# @", "# @ about text", "# @-about"])
    def test_missing_keyword(self, line: str) -> None:
        assert scan_line(line) is None

    def test_malformed_payload_is_dropped(self) -> None:
        assert scan_line("# @name") is None

    def test_arg_line(self) -> None:
        assert scan_line("# @arg directory <dir> The directory") == ArgTag(
            CommandArgument("directory", arg_type=ArgType.DIR, description="The directory")
        )

    def test_opt_line(self) -> None:
        assert scan_line("# @opt verbose 'v' Talk more") == OptTag(
            CommandOption("verbose", short="v", description="Talk more")
        )


# ---------------------------------------------------------------------------
# Whole texts
# ---------------------------------------------------------------------------

class TestScanTags:
    def test_empty_text(self) -> None:
        assert scan_tags("") == []

    def test_tags_in_source_order(self) -> None:
        text = "# @sub one\n# @about first\nfoo\n# @sub two\n"
        assert scan_tags(text) == [SubTag("one"), AboutTag("first"), SubTag("two")]

    def test_last_line_without_line_break(self, list_script_text: str) -> None:
        tags = scan_tags(list_script_text)
        assert tags == [
            AboutTag("List files in the current directory"),
            ArgTag(
                CommandArgument(
                    "directory",
                    arg_type=ArgType.DIR,
                    description="The directory to list files in",
                )
            ),
        ]

    def test_final_tag_line_without_line_break(self) -> None:
        assert scan_tags("echo hi\n# @about Last line") == [AboutTag("Last line")]

    def test_tags_never_span_lines(self) -> None:
        assert scan_tags("#\n# @about x") == [AboutTag("x")]
        assert scan_tags("# @name\nfoo\n") == []

    def test_crlf_line_endings(self) -> None:
        assert scan_tags("# @about x\r\n# @name y\r\n") == [AboutTag("x"), NameTag("y")]

    @pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_newline_ends_a_line(self, separator: str) -> None:
        assert scan_tags(f"echo x{separator}# @about injected\n") == []

    def test_lone_carriage_return_does_not_end_a_line(self) -> None:
        assert scan_tags("echo x\r# @about injected\n") == []

    def test_mixed_junk_is_skipped(self) -> None:
        text = (
            "#!/usr/bin/env zsh\n"
            "# @wrong sdlklak\n"
            "# plain comment\n"
            "# @about kept\n"
            "echo done\n"
        )
        assert scan_tags(text) == [AboutTag("kept")]

    def test_iter_tags_is_lazy(self) -> None:
        iterator = iter_tags("# @about a\n# @about b\n")
        assert next(iterator) == AboutTag("a")
        assert next(iterator) == AboutTag("b")
        with pytest.raises(StopIteration):
            next(iterator)
