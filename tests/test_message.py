"""Tests for convcommit.message module."""

import re

import pytest
from pydantic import ValidationError

from convcommit.exceptions import ConfigError
from convcommit.message import (
    DEFAULT_BREAKING_TEXT,
    DEFAULT_MENU_TYPES,
    CommitMessage,
    CommitType,
    FormatConfig,
    format_config_to_dict,
    load_format_config_from_dict,
    render_header,
    render_message,
    sanitize_subject,
    wrap_text,
)

HEADER_PATTERN = re.compile(r"^(?P<type>[a-z]+)(\((?P<scope>[^()\n]+)\))?(?P<bang>!)?: (?P<subject>\S.*)$")


class TestCommitMessage:
    """Tests for CommitMessage Pydantic model."""

    def test_valid_message(self):
        """Test creating a valid message."""
        msg = CommitMessage(type=CommitType.FIX, subject="handle empty input")
        assert msg.type == CommitType.FIX
        assert msg.scope is None
        assert msg.breaking is False

    def test_type_from_string(self):
        """Test that type names are coerced to CommitType."""
        msg = CommitMessage(type="FEAT", subject="add login")
        assert msg.type == CommitType.FEAT

    def test_unknown_type_raises_error(self):
        """Test that an unknown type is rejected."""
        with pytest.raises(ValidationError):
            CommitMessage(type="wip", subject="add login")

    def test_empty_subject_raises_error(self):
        """Test that empty subject raises validation error."""
        with pytest.raises(ValidationError) as exc_info:
            CommitMessage(type="feat", subject="")
        assert "Subject cannot be empty" in str(exc_info.value)

    def test_whitespace_subject_raises_error(self):
        """Test that whitespace-only subject raises validation error."""
        with pytest.raises(ValidationError) as exc_info:
            CommitMessage(type="feat", subject="   ")
        assert "Subject cannot be empty" in str(exc_info.value)

    def test_subject_keeps_first_line(self):
        """Test that a multi-line subject keeps only its first line."""
        msg = CommitMessage(type="feat", subject="  add login\nmore text")
        assert msg.subject == "add login"

    def test_blank_optionals_become_none(self):
        """Test that blank scope, body and issues become None."""
        msg = CommitMessage(type="feat", subject="x", scope="  ", body="", issues=" ")
        assert msg.scope is None
        assert msg.body is None
        assert msg.issues is None

    def test_scope_with_parentheses_raises_error(self):
        """Test that a scope containing parentheses is rejected."""
        with pytest.raises(ValidationError):
            CommitMessage(type="feat", scope="api(v2)", subject="x")

    def test_breaking_description_implies_breaking(self):
        """Test that a breaking description sets the breaking flag."""
        msg = CommitMessage(type="feat", subject="x", breaking_description="drop v1")
        assert msg.breaking is True


class TestRenderHeader:
    """Tests for render_header function."""

    def test_type_scope_subject(self):
        """Test the basic type(scope): subject header."""
        msg = CommitMessage(type="feat", scope="api", subject="add login")
        assert render_header(msg, FormatConfig()) == "feat(api): add login"

    def test_without_scope(self):
        """Test header when no scope is given."""
        msg = CommitMessage(type="fix", subject="handle null")
        assert render_header(msg, FormatConfig()) == "fix: handle null"

    def test_emoji(self):
        """Test that the type emoji precedes the subject when enabled."""
        msg = CommitMessage(type="feat", scope="api", subject="add login")
        assert render_header(msg, FormatConfig(emoji=True)) == "feat(api): 🎸 add login"

    def test_breaking_bang(self):
        """Test the ! marker for breaking changes."""
        msg = CommitMessage(type="feat", scope="api", subject="drop v1", breaking=True)
        assert render_header(msg, FormatConfig(breaking_bang=True)) == "feat(api)!: drop v1"

    def test_no_bang_by_default(self):
        """Test that breaking changes don't get ! unless configured."""
        msg = CommitMessage(type="feat", subject="drop v1", breaking=True)
        assert render_header(msg, FormatConfig()) == "feat: drop v1"

    def test_long_subject_is_cropped(self):
        """Test that the header never exceeds the line limit."""
        msg = CommitMessage(type="refactor", scope="core", subject="word " * 40)
        header = render_header(msg, FormatConfig(max_line_length=60))
        assert len(header) <= 60
        assert header.startswith("refactor(core): ")
        assert header.endswith("...")

    def test_long_scope_crops_whole_header(self):
        """Test that a prefix wider than the limit crops the whole header."""
        msg = CommitMessage(type="refactor", scope="s" * 30, subject="rename things")
        header = render_header(msg, FormatConfig(max_line_length=20))
        assert len(header) == 20
        assert header == "refactor(" + "s" * 11

    def test_prefix_leaves_no_room_for_ellipsis(self):
        """Test cropping when only 1 to 3 columns remain for the subject."""
        msg = CommitMessage(type="refactor", scope="abcdefg", subject="rename things")
        header = render_header(msg, FormatConfig(max_line_length=20))
        assert header == "refactor(abcdefg): r"

    def test_prefix_leaves_room_for_ellipsis(self):
        """Test that 4 remaining columns still get an ellipsis."""
        msg = CommitMessage(type="refactor", scope="abcd", subject="rename things")
        header = render_header(msg, FormatConfig(max_line_length=20))
        assert header == "refactor(abcd): r..."

    def test_header_within_limit_for_any_scope_length(self):
        """Test the line limit holds as the scope grows past the width."""
        for length in range(1, 40):
            msg = CommitMessage(type="feat", scope="x" * length, subject="add login", breaking=True)
            config = FormatConfig(max_line_length=20, emoji=True, breaking_bang=True)
            assert len(render_header(msg, config)) <= 20

    def test_every_type_matches_grammar(self):
        """Test that every commit type renders a grammatical header."""
        for commit_type in CommitType:
            msg = CommitMessage(type=commit_type, scope="cli", subject="do the thing")
            match = HEADER_PATTERN.match(render_header(msg, FormatConfig()))
            assert match is not None
            assert match.group("type") == commit_type.value
            assert match.group("scope") == "cli"
            assert match.group("subject") == "do the thing"


class TestRenderMessage:
    """Tests for render_message function."""

    def test_header_only(self):
        """Test message with no body or footers."""
        msg = CommitMessage(type="feat", scope="api", subject="add login")
        assert render_message(msg) == "feat(api): add login"

    def test_body_separated_by_blank_line(self):
        """Test that the body follows a blank line."""
        msg = CommitMessage(type="docs", subject="fix typo", body="In the README.")
        assert render_message(msg) == "docs: fix typo\n\nIn the README."

    def test_breaking_without_description(self):
        """Test the default BREAKING CHANGE footer."""
        msg = CommitMessage(type="feat", subject="drop v1", breaking=True)
        result = render_message(msg)
        assert result == f"feat: drop v1\n\nBREAKING CHANGE: {DEFAULT_BREAKING_TEXT}"

    def test_full_message(self, sample_message):
        """Test message with body, breaking change and issues."""
        result = render_message(sample_message)
        assert result == (
            "feat(api): add login\n"
            "\n"
            "Accept username and password on /login.\n"
            "\n"
            "BREAKING CHANGE: sessions issued before this change are invalid\n"
            "Refs: #42"
        )

    def test_issues_without_breaking(self):
        """Test that issues alone produce a Refs footer."""
        msg = CommitMessage(type="fix", subject="handle null", issues="#7, #9")
        assert render_message(msg) == "fix: handle null\n\nRefs: #7, #9"

    def test_body_is_wrapped(self):
        """Test that long body lines are wrapped at the line limit."""
        msg = CommitMessage(type="feat", subject="x", body="lorem ipsum " * 30)
        result = render_message(msg, FormatConfig(max_line_length=50))
        body_lines = result.split("\n")[2:]
        assert len(body_lines) > 1
        assert all(len(line) <= 50 for line in body_lines)

    def test_breaking_footer_is_wrapped(self):
        """Test that a long breaking description is wrapped too."""
        msg = CommitMessage(type="feat", subject="x", breaking_description="changed " * 20)
        result = render_message(msg, FormatConfig(max_line_length=40))
        footer_lines = result.split("\n")[2:]
        assert footer_lines[0].startswith("BREAKING CHANGE: ")
        assert all(len(line) <= 40 for line in footer_lines)


class TestWrapText:
    """Tests for wrap_text function."""

    def test_keeps_paragraph_breaks(self):
        """Test that blank lines between paragraphs survive."""
        assert wrap_text("first\n\nsecond", 72) == "first\n\nsecond"

    def test_does_not_split_long_words(self):
        """Test that words longer than the width stay whole."""
        url = "https://example.com/" + "a" * 80
        assert wrap_text(url, 40) == url


class TestSanitizeSubject:
    """Tests for sanitize_subject function."""

    def test_short_subject_unchanged(self):
        """Test that a short subject passes through."""
        assert sanitize_subject("add login", 72) == "add login"

    def test_long_subject_truncated(self):
        """Test that a long subject is truncated with ellipsis."""
        result = sanitize_subject("a" * 100, 50)
        assert len(result) == 50
        assert result.endswith("...")

    def test_never_longer_than_max_length(self):
        """Test that tiny or negative limits never produce a longer result."""
        assert sanitize_subject("abcdef", 3) == "abc"
        assert sanitize_subject("abcdef", 2) == "ab"
        assert sanitize_subject("abcdef", 0) == ""
        assert sanitize_subject("abcdef", -5) == ""


class TestFormatConfig:
    """Tests for format configuration loading."""

    def test_defaults(self):
        """Test that an empty dict gives the defaults."""
        config = load_format_config_from_dict({})
        assert config.types == DEFAULT_MENU_TYPES
        assert config.emoji is False
        assert config.max_line_length == 100
        assert config.breaking_bang is False

    def test_custom_types_in_order(self):
        """Test that configured types keep their order."""
        config = load_format_config_from_dict({"commit": {"types": ["fix", "release", "feat"]}})
        assert config.types == [CommitType.FIX, CommitType.RELEASE, CommitType.FEAT]

    def test_unknown_types_dropped(self):
        """Test that unknown and duplicate type names are dropped."""
        config = load_format_config_from_dict({"commit": {"types": ["fix", "wip", "FIX", "ci"]}})
        assert config.types == [CommitType.FIX, CommitType.CI]

    def test_all_unknown_types_fall_back(self):
        """Test fallback to the default menu when no type is valid."""
        config = load_format_config_from_dict({"commit": {"types": ["wip"]}})
        assert config.types == DEFAULT_MENU_TYPES

    def test_line_length_clamped(self):
        """Test that tiny line lengths are raised to the minimum."""
        config = load_format_config_from_dict({"commit": {"max_line_length": 5}})
        assert config.max_line_length == 20

    def test_invalid_line_length_uses_default(self):
        """Test that a non-numeric line length falls back to the default."""
        config = load_format_config_from_dict({"commit": {"max_line_length": "wide"}})
        assert config.max_line_length == 100

    def test_non_mapping_section_raises(self):
        """Test that a commit section that is not a mapping is rejected."""
        with pytest.raises(ConfigError):
            load_format_config_from_dict({"commit": ["feat", "fix"]})

    def test_to_dict(self):
        """Test converting a config to a dictionary."""
        config = FormatConfig(types=[CommitType.FIX], emoji=True, max_line_length=72)
        assert format_config_to_dict(config) == {
            "commit": {
                "types": ["fix"],
                "emoji": True,
                "max_line_length": 72,
                "breaking_bang": False,
            }
        }
