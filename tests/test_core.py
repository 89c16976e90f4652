"""
Unit tests for core modules: DiffParser, DiffSummarizer, commit grammar,
release notes, version suggestions, Config.

Run with:
    pytest tests/test_core.py -v
"""

import json

import pytest

from gitgrammar.commit import (
    CommitType,
    ConventionalCommit,
    compose_commit_message,
    parse_commit_message,
    validate_commit_message,
)
from gitgrammar.config import Config, ConfigManager
from gitgrammar.diff import DiffLine, DiffParser, DiffSummarizer, LineKind, Priority, ScanState, parse_diff
from gitgrammar.git import TagInfo
from gitgrammar.release import (
    FIRST_RELEASE_CANDIDATES,
    ReleaseCategory,
    classify_commits,
    format_release_notes,
    strip_commit_hash,
    suggest_from_tags,
    suggest_next_versions,
)

SIMPLE_DIFF = (
    "--- a/x.txt\n"
    "+++ b/x.txt\n"
    "@@ -1,2 +1,3 @@\n"
    " keep\n"
    "-old\n"
    "+new\n"
    "+added\n"
)


def _numbers(lines, attr):
    return [getattr(line, attr) for line in lines if getattr(line, attr) is not None]


# ---------------------------------------------------------------------------
# DiffParser — structure
# ---------------------------------------------------------------------------

class TestDiffParser:
    """parse_diff() end-to-end."""

    def test_single_file_example(self):
        files = parse_diff(SIMPLE_DIFF)

        assert len(files) == 1
        patch = files[0]
        assert patch.old_path == "x.txt"
        assert patch.new_path == "x.txt"
        assert len(patch.hunks) == 1
        assert list(patch.hunks[0].lines) == [
            DiffLine(LineKind.CONTEXT, "keep", 1, 1),
            DiffLine(LineKind.REMOVED, "old", old_line_number=2),
            DiffLine(LineKind.ADDED, "new", new_line_number=2),
            DiffLine(LineKind.ADDED, "added", new_line_number=3),
        ]

    def test_trailing_newline_is_not_a_context_line(self):
        with_newline = parse_diff(SIMPLE_DIFF)
        without_newline = parse_diff(SIMPLE_DIFF.rstrip('\n'))
        assert with_newline == without_newline
        assert len(with_newline[0].hunks[0].lines) == 4

    def test_header_kept_verbatim(self):
        hunk = parse_diff(SIMPLE_DIFF)[0].hunks[0]
        assert hunk.header == "@@ -1,2 +1,3 @@"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n", "   \n\t\n"])
    def test_empty_input(self, raw):
        assert parse_diff(raw) == []

    def test_multiple_files_and_hunks(self):
        raw = (
            "diff --git a/src/a.py b/src/a.py\n"
            "index 1111111..2222222 100644\n"
            "--- a/src/a.py\n"
            "+++ b/src/a.py\n"
            "@@ -1,2 +1,2 @@\n"
            "-import os\n"
            "+import sys\n"
            " x = 1\n"
            "@@ -20,3 +20,4 @@ def main():\n"
            "     a()\n"
            "+    b()\n"
            "     c()\n"
            "     d()\n"
            "diff --git a/README.md b/README.md\n"
            "--- a/README.md\n"
            "+++ b/README.md\n"
            "@@ -3 +3 @@\n"
            "-Old title\n"
            "+New title\n"
        )
        files = parse_diff(raw)

        assert [f.path for f in files] == ["src/a.py", "README.md"]
        assert len(files[0].hunks) == 2
        second = files[0].hunks[1]
        assert second.lines[0].old_line_number == 20
        assert second.lines[1] == DiffLine(LineKind.ADDED, "    b()", new_line_number=21)
        assert second.lines[2].old_line_number == 21
        assert second.lines[2].new_line_number == 22
        assert files[1].hunks[0].lines[0].old_line_number == 3

    def test_hunk_header_fields(self):
        raw = "--- a/f.py\n+++ b/f.py\n@@ -10,3 +12,4 @@ def foo():\n x\n"
        hunk = parse_diff(raw)[0].hunks[0]
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (10, 3, 12, 4)
        assert hunk.section == "def foo():"

    def test_hunk_counts_default_to_one(self):
        hunk = parse_diff("--- a/f\n+++ b/f\n@@ -5 +7 @@\n-a\n+b\n")[0].hunks[0]
        assert (hunk.old_start, hunk.old_count, hunk.new_start, hunk.new_count) == (5, 1, 7, 1)
        assert hunk.section == ""
        assert hunk.lines[0].old_line_number == 5
        assert hunk.lines[1].new_line_number == 7

    def test_unparsable_header_starts_at_one(self):
        raw = "--- a/f\n+++ b/f\n@@ garbage @@\n ctx\n-gone\n"
        hunk = parse_diff(raw)[0].hunks[0]
        assert hunk.header == "@@ garbage @@"
        assert hunk.lines[0] == DiffLine(LineKind.CONTEXT, "ctx", 1, 1)
        assert hunk.lines[1].old_line_number == 2

    def test_new_file(self):
        raw = "--- /dev/null\n+++ b/new.txt\n@@ -0,0 +1,2 @@\n+a\n+b\n"
        patch = parse_diff(raw)[0]
        assert patch.old_path == ""
        assert patch.new_path == "new.txt"
        assert patch.is_new
        assert _numbers(patch.hunks[0].lines, "new_line_number") == [1, 2]

    def test_deleted_file(self):
        raw = "--- a/old.txt\n+++ /dev/null\n@@ -1,2 +0,0 @@\n-a\n-b\n"
        patch = parse_diff(raw)[0]
        assert patch.new_path == ""
        assert patch.is_deleted
        assert patch.path == "old.txt"
        assert _numbers(patch.hunks[0].lines, "old_line_number") == [1, 2]

    def test_no_newline_marker_ignored(self):
        raw = "--- a/f\n+++ b/f\n@@ -1 +1 @@\n-a\n\\ No newline at end of file\n+b\n\\ No newline at end of file\n"
        lines = parse_diff(raw)[0].hunks[0].lines
        assert [line.kind for line in lines] == [LineKind.REMOVED, LineKind.ADDED]

    def test_empty_line_inside_hunk_is_context(self):
        raw = "--- a/f\n+++ b/f\n@@ -4,3 +4,3 @@\n a\n\n b\n"
        lines = parse_diff(raw)[0].hunks[0].lines
        assert lines[1] == DiffLine(LineKind.CONTEXT, "", 5, 5)
        assert lines[2].old_line_number == 6

    def test_timestamp_suffix_stripped_from_paths(self):
        raw = "--- a/x.txt\t2024-01-01 10:00:00\n+++ b/x.txt\t2024-01-02 10:00:00\n"
        patch = parse_diff(raw)[0]
        assert (patch.old_path, patch.new_path) == ("x.txt", "x.txt")

    def test_truncated_after_old_path(self):
        files = parse_diff("--- a/x.txt")
        assert len(files) == 1
        assert files[0].new_path == ""
        assert files[0].hunks == ()

    def test_lines_before_first_file_ignored(self):
        raw = "+++ b/orphan\n@@ -1 +1 @@\n+floating\n" + SIMPLE_DIFF
        files = parse_diff(raw)
        assert len(files) == 1
        assert files[0].path == "x.txt"

    @pytest.mark.parametrize("raw", [
        "Binary files a/logo.png and b/logo.png differ\n",
        "\x00\x01\x02\xff garbage",
        "@@ -1 +1 @@\n+no file header",
        "--- \n+++ \n@@ \n+\n-\n \n",
    ])
    def test_never_raises(self, raw):
        assert isinstance(parse_diff(raw), list)

    def test_additions_and_deletions(self):
        patch = parse_diff(SIMPLE_DIFF)[0]
        assert patch.additions == 2
        assert patch.deletions == 1


# ---------------------------------------------------------------------------
# DiffParser — line number bookkeeping
# ---------------------------------------------------------------------------

class TestDiffLineNumbers:

    @pytest.fixture
    def hunk(self):
        raw = (
            "--- a/f.py\n+++ b/f.py\n"
            "@@ -40,8 +52,9 @@\n"
            " a\n-b\n-c\n+C\n d\n+e\n+f\n g\n-h\n i\n"
        )
        return parse_diff(raw)[0].hunks[0]

    def test_first_numbers_match_header(self, hunk):
        assert _numbers(hunk.lines, "old_line_number")[0] == 40
        assert _numbers(hunk.lines, "new_line_number")[0] == 52

    @pytest.mark.parametrize("attr", ["old_line_number", "new_line_number"])
    def test_numbers_increase_by_one(self, hunk, attr):
        numbers = _numbers(hunk.lines, attr)
        assert all(b - a == 1 for a, b in zip(numbers, numbers[1:]))

    def test_added_rows_have_no_old_number(self, hunk):
        assert all(line.old_line_number is None for line in hunk.lines if line.kind is LineKind.ADDED)

    def test_removed_rows_have_no_new_number(self, hunk):
        assert all(line.new_line_number is None for line in hunk.lines if line.kind is LineKind.REMOVED)


# ---------------------------------------------------------------------------
# DiffParser — scanner state
# ---------------------------------------------------------------------------

class TestDiffScanner:

    def test_state_transitions(self):
        parser = DiffParser()
        assert parser.state is ScanState.NO_FILE
        parser.feed("--- a/x")
        assert parser.state is ScanState.IN_FILE
        parser.feed("+++ b/x")
        parser.feed("@@ -3,1 +7,1 @@")
        assert parser.state is ScanState.IN_HUNK
        assert (parser.old_counter, parser.new_counter) == (3, 7)
        parser.feed("-gone")
        assert (parser.old_counter, parser.new_counter) == (4, 7)

        files = parser.finish()
        assert parser.state is ScanState.NO_FILE
        assert len(files) == 1
        assert files[0].hunks[0].lines[0].old_line_number == 3

    def test_parser_is_reusable(self):
        parser = DiffParser()
        first = parser.parse(SIMPLE_DIFF)
        second = parser.parse(SIMPLE_DIFF)
        assert first == second
        assert len(second) == 1

    def test_results_are_immutable(self):
        patch = parse_diff(SIMPLE_DIFF)[0]
        with pytest.raises(AttributeError):
            patch.old_path = "other"


# ---------------------------------------------------------------------------
# DiffSummarizer — file classification
# ---------------------------------------------------------------------------

class TestDiffSummarizerClassify:
    """DiffSummarizer.get_priority() file classification."""

    @pytest.fixture
    def summarizer(self):
        return DiffSummarizer()

    @pytest.mark.parametrize("path, expected", [
        ("src/cli/main.py", Priority.SOURCE),
        ("lib/utils.ts", Priority.SOURCE),
        ("tests/test_main.py", Priority.TEST),
        ("src/utils.spec.ts", Priority.TEST),
        ("pyproject.toml", Priority.CONFIG),
        ("Dockerfile", Priority.CONFIG),
        ("README.md", Priority.DOCS),
        ("docs/guide.md", Priority.DOCS),
        ("package-lock.json", Priority.NOISE),
        ("node_modules/pkg/index.js", Priority.NOISE),
    ])
    def test_priority(self, summarizer, path, expected):
        assert summarizer.get_priority(path) == expected


class TestDiffSummarizerSummarize:

    def _patch(self, path, added=1):
        body = "".join(f"+line {i}\n" for i in range(added))
        return f"--- a/{path}\n+++ b/{path}\n@@ -0,0 +1,{added} @@\n{body}"

    def test_filters_noise_and_orders_groups(self):
        raw = (
            self._patch("README.md")
            + self._patch("tests/test_app.py")
            + self._patch("yarn.lock")
            + self._patch("src/app.py", added=3)
        )
        summary = DiffSummarizer().summarize(parse_diff(raw))

        assert summary.total_files == 4
        assert summary.filtered_files == 1
        assert [p for p, _ in summary.groups] == [Priority.SOURCE, Priority.TEST, Priority.DOCS]
        assert summary.file_details[0] == ("src/app.py", 3, 0)
        assert summary.total_additions == 5

    def test_larger_changes_first_within_group(self):
        raw = self._patch("src/small.py", added=1) + self._patch("src/big.py", added=5)
        summary = DiffSummarizer().summarize(parse_diff(raw))
        assert [path for path, _, _ in summary.file_details] == ["src/big.py", "src/small.py"]


# ---------------------------------------------------------------------------
# Commit grammar — parsing
# ---------------------------------------------------------------------------

class TestParseCommitMessage:

    def test_full_header_and_body(self):
        commit = parse_commit_message("feat(api)!: drop v1 routes\n\nClients must move to /v2.\nSee docs.")
        assert commit.commit_type is CommitType.FEAT
        assert commit.scope == "api"
        assert commit.breaking is True
        assert commit.subject == "drop v1 routes"
        assert commit.body == "Clients must move to /v2.\nSee docs."

    def test_subject_only(self):
        commit = parse_commit_message("fix: crash on null")
        assert commit == ConventionalCommit(commit_type=CommitType.FIX, subject="crash on null")

    def test_breaking_without_scope(self):
        commit = parse_commit_message("refactor!: rename config keys")
        assert commit.scope is None
        assert commit.breaking is True

    def test_empty_scope_is_none(self):
        assert parse_commit_message("chore(): bump deps").scope is None

    @pytest.mark.parametrize("type_name", ["feat", "fix", "chore", "docs", "refactor",
                                           "test", "ci", "perf", "style", "revert"])
    def test_all_known_types(self, type_name):
        commit = parse_commit_message(f"{type_name}: do it")
        assert commit.commit_type == CommitType(type_name)

    def test_unknown_type_falls_back_unlabeled(self):
        commit = parse_commit_message("feature(ui): add dark mode\n\ndetails")
        assert commit.commit_type is None
        assert commit.scope is None
        assert commit.breaking is False
        assert commit.subject == "feature(ui): add dark mode"
        assert commit.body == "details"

    def test_free_form_message(self):
        commit = parse_commit_message("Update README\n\nMore detail\nline 2\n")
        assert not commit.is_conventional
        assert commit.subject == "Update README"
        assert commit.body == "More detail\nline 2"

    def test_body_without_blank_line_falls_back(self):
        commit = parse_commit_message("feat: x\nmore text")
        assert commit.commit_type is None
        assert commit.subject == "feat: x"
        assert commit.body is None

    def test_trailing_newline_from_git(self):
        commit = parse_commit_message("docs: fix typo\n")
        assert commit.commit_type is CommitType.DOCS
        assert commit.subject == "fix typo"

    def test_crlf_line_endings(self):
        commit = parse_commit_message("fix: y\r\n\r\nbody text\r\n")
        assert commit.commit_type is CommitType.FIX
        assert commit.body == "body text"

    def test_whitespace_only_blank_line_in_fallback(self):
        commit = parse_commit_message("Merge branch 'main'\n  \nConflicts resolved")
        assert commit.body == "Conflicts resolved"

    @pytest.mark.parametrize("text", ["", "   ", "\n\n"])
    def test_empty_message(self, text):
        assert parse_commit_message(text) == ConventionalCommit()


# ---------------------------------------------------------------------------
# Commit grammar — composing
# ---------------------------------------------------------------------------

class TestComposeCommitMessage:

    @pytest.mark.parametrize("commit, expected", [
        pytest.param(
            ConventionalCommit(CommitType.FEAT, "auth", True, "add login", "Uses OAuth."),
            "feat(auth)!: add login\n\nUses OAuth.",
            id="all-fields",
        ),
        pytest.param(
            ConventionalCommit(CommitType.FIX, None, False, "crash on null"),
            "fix: crash on null",
            id="subject-only",
        ),
        pytest.param(
            ConventionalCommit(CommitType.CI, None, True, "drop py3.8"),
            "ci!: drop py3.8",
            id="breaking-no-scope",
        ),
        pytest.param(
            ConventionalCommit(CommitType.DOCS, "  ", False, "  tidy  ", "   "),
            "docs: tidy",
            id="blank-optionals-omitted",
        ),
        pytest.param(
            ConventionalCommit(None, None, False, "Update README", "More detail"),
            "Update README\n\nMore detail",
            id="no-type",
        ),
    ])
    def test_compose(self, commit, expected):
        assert compose_commit_message(commit) == expected

    def test_subject_and_scope_forced_to_one_line(self):
        commit = ConventionalCommit(CommitType.PERF, "db\ncache", False, "line one\nline two")
        assert compose_commit_message(commit) == "perf(db cache): line one line two"

    def test_parentheses_removed_from_scope(self):
        commit = ConventionalCommit(CommitType.FEAT, "a)b(", False, "x")
        assert compose_commit_message(commit) == "feat(ab): x"

    def test_no_control_characters(self):
        commit = ConventionalCommit(CommitType.FIX, None, False, "ring\x07 bell", "col1\tcol2\r\nnext\x1b[0m")
        message = compose_commit_message(commit)
        assert message == "fix: ring bell\n\ncol1 col2\nnext[0m"
        assert not any(ord(c) < 32 and c != '\n' for c in message)

    def test_header_property(self):
        commit = ConventionalCommit(CommitType.STYLE, "ui", False, "align buttons", "body")
        assert commit.header == "style(ui): align buttons"

    @pytest.mark.parametrize("commit", [
        ConventionalCommit(CommitType.FEAT, "api", True, "drop v1", "line 1\n\nline 3"),
        ConventionalCommit(CommitType.REVERT, None, False, "revert: \"feat: x\""),
        ConventionalCommit(CommitType.TEST, "parser", False, "cover: edge cases"),
        ConventionalCommit(None, None, False, "Plain message", "With body"),
    ])
    def test_round_trip(self, commit):
        text = compose_commit_message(commit)
        assert compose_commit_message(parse_commit_message(text)) == text


# ---------------------------------------------------------------------------
# Commit grammar — validation
# ---------------------------------------------------------------------------

class TestValidateCommitMessage:

    def test_valid(self):
        assert validate_commit_message("feat(cli): add flag\n\n- details") == (True, "")

    @pytest.mark.parametrize("text, fragment", [
        ("", "Empty commit message"),
        ("Update stuff", "Missing conventional commit format"),
        ("feature: add x", "Unknown commit type 'feature'"),
        ("feat: \n\nbody", "Empty subject"),
        ("feat: x\nbody", "blank line"),
    ])
    def test_invalid(self, text, fragment):
        ok, reason = validate_commit_message(text)
        assert ok is False
        assert fragment in reason

    def test_subject_length_limit(self):
        ok, reason = validate_commit_message("fix: " + "a" * 30, max_subject_length=20)
        assert ok is False
        assert "max 20" in reason

    def test_commit_type_lookup(self):
        assert CommitType.from_token("feat") is CommitType.FEAT
        assert CommitType.from_token("feature") is None
        assert CommitType.from_token(None) is None
        assert CommitType.REVERT.description == "Revert a commit"


# ---------------------------------------------------------------------------
# Release notes
# ---------------------------------------------------------------------------

class TestReleaseNotes:

    def test_empty_input(self):
        assert format_release_notes([]) == ""

    def test_fixed_category_order(self):
        notes = format_release_notes(["def5678 fix: crash on null", "abc1234 feat: add login"])
        assert notes == (
            "### ✨ Features\n"
            "- feat: add login\n"
            "\n"
            "### 🐛 Bug Fixes\n"
            "- fix: crash on null"
        )

    def test_all_sections_in_order(self):
        notes = format_release_notes([
            "a1b2c3d chore: bump deps",
            "b2c3d4e docs: add guide",
            "c3d4e5f refactor(core): split module",
            "d4e5f6a fix(ui): overflow",
            "e5f6a7b feat!: new api",
        ])
        headings = [line for line in notes.split('\n') if line.startswith('###')]
        assert headings == [
            "### ✨ Features",
            "### 🐛 Bug Fixes",
            "### ♻️ Refactors",
            "### 📚 Docs",
            "### 🔧 Other",
        ]

    def test_input_order_kept_within_section(self):
        notes = format_release_notes(["1111aaa feat: one", "2222bbb fix: x", "3333ccc feat: two"])
        assert "- feat: one\n- feat: two" in notes

    @pytest.mark.parametrize("message", [
        "Update readme",
        "feature: lookalike type",
        "fixes everything",
        "Merge branch 'main'",
    ])
    def test_non_conventional_goes_to_other(self, message):
        groups = classify_commits([f"abcdef1 {message}"])
        assert groups[ReleaseCategory.OTHER] == [message]

    def test_plain_titles(self):
        notes = format_release_notes(["abc1234 feat: add login"], emoji=False)
        assert notes == "### Features\n- feat: add login"

    def test_blank_message_counts_as_other(self):
        groups = classify_commits(["abc1234 feat: x", "def5678 "])
        assert groups[ReleaseCategory.FEATURES] == ["feat: x"]
        assert groups[ReleaseCategory.OTHER] == [""]
        assert format_release_notes([""], emoji=False) == "### Other\n- "

    def test_full_sha256_hash_stripped(self):
        notes = format_release_notes(["a" * 64 + " feat: x"])
        assert notes == "### ✨ Features\n- feat: x"

    @pytest.mark.parametrize("line, expected", [
        ("abc1234 feat: x", "feat: x"),
        ("0123456789abcdef0123456789abcdef01234567 fix: y", "fix: y"),
        ("0123456789abcdef" * 4 + " docs: z", "docs: z"),
        ("abc feat: x", "abc feat: x"),
        ("add login", "add login"),
        ("ABC1234 feat: x", "ABC1234 feat: x"),
    ])
    def test_strip_commit_hash(self, line, expected):
        assert strip_commit_hash(line) == expected


# ---------------------------------------------------------------------------
# Version suggestions
# ---------------------------------------------------------------------------

class TestSuggestNextVersions:

    def test_bumps(self):
        assert suggest_next_versions("v1.2.3") == ["v1.2.4", "v1.3.0", "v2.0.0"]

    def test_without_v_prefix(self):
        assert suggest_next_versions("0.9.12") == ["v0.9.13", "v0.10.0", "v1.0.0"]

    @pytest.mark.parametrize("tag", [None, "", "   "])
    def test_no_prior_tag(self, tag):
        assert suggest_next_versions(tag) == ["v0.1.0", "v1.0.0"]

    @pytest.mark.parametrize("tag", [
        "release-7", "v1.2", "v1.2.3.4", "v1.x.3", "v1..3", "v1.2.3-beta", "vv1.2.3", "v-1.2.3",
    ])
    def test_not_semver(self, tag):
        assert suggest_next_versions(tag) == []

    def test_leading_zeros(self):
        assert suggest_next_versions("v01.02.03") == ["v1.2.4", "v1.3.0", "v2.0.0"]

    def test_returns_fresh_list(self):
        suggestions = suggest_next_versions(None)
        suggestions.append("v9.9.9")
        assert FIRST_RELEASE_CANDIDATES == ["v0.1.0", "v1.0.0"]

    def test_from_tags_uses_newest(self):
        tags = [TagInfo(name="v2.0.0"), TagInfo(name="v1.9.0")]
        assert suggest_from_tags(tags) == ["v2.0.1", "v2.1.0", "v3.0.0"]

    def test_from_empty_tag_list(self):
        assert suggest_from_tags([]) == ["v0.1.0", "v1.0.0"]


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _no_env_color(monkeypatch):
    monkeypatch.delenv("GG_COLOR", raising=False)


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.color == "auto"
        assert config.line_numbers is True
        assert config.emoji is True
        assert config.max_subject_length == 72
        assert config.no_changes_placeholder == "No changes since last tag."

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"color": "never", "unknown_key": "value"})
        assert config.color == "never"
        assert not hasattr(config, "unknown_key")

    def test_validate_invalid_color(self):
        config = Config(color="rainbow")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.color == "auto"  # reset to default

    def test_validate_invalid_bool(self):
        config = Config(emoji="yes")
        warnings = config.validate()
        assert any("emoji" in w for w in warnings)
        assert config.emoji is True

    def test_validate_invalid_max_subject_length(self):
        config = Config(max_subject_length=-1)
        warnings = config.validate()
        assert any("max_subject_length" in w for w in warnings)
        assert config.max_subject_length == 72

    def test_validate_valid_config_no_warnings(self):
        assert Config().validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"color": "invalid"})
        err = capsys.readouterr().err
        assert "Config warning" in err


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        config = ConfigManager().load()
        assert config.color == "auto"
        assert config.emoji is True

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".ggrc").write_text(json.dumps({"color": "never", "emoji": False}))

        manager = ConfigManager()
        config = manager.load()
        assert config.color == "never"
        assert config.emoji is False
        assert manager.get_config_path() == tmp_path / ".ggrc"

    def test_save_and_load_roundtrip(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)

        ConfigManager().save(Config(color="always", max_file_display=3), global_config=True)
        loaded = ConfigManager().load()
        assert loaded.color == "always"
        assert loaded.max_file_display == 3

    def test_malformed_json_returns_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".ggrc").write_text("not valid json {{{")

        config = ConfigManager().load()
        assert config.color == "auto"  # falls back to defaults
        assert "Could not load" in capsys.readouterr().err

    def test_env_overrides_color(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        monkeypatch.setenv("GG_COLOR", "never")
        assert ConfigManager().load().color == "never"
