"""Tests for string-level path algorithms."""

import pytest
from sftpmirror.core.errors import PathTooLongError, SliceRangeError
from sftpmirror.filesystem import pathops


class TestSlicePath:
    """Tests for slice_path."""

    def test_slice_returns_half_open_range(self) -> None:
        """Start is inclusive and stop exclusive."""
        assert pathops.slice_path("abcdef", 1, 4) == "bcd"
        assert pathops.slice_path("abcdef", 0, 6) == "abcdef"

    @pytest.mark.parametrize(
        ("start", "stop"),
        [(3, 3), (4, 2), (0, 7), (-1, 2)],
    )
    def test_slice_rejects_invalid_bounds(self, start: int, stop: int) -> None:
        """Degenerate or out-of-range bounds raise SliceRangeError."""
        with pytest.raises(SliceRangeError) as exc_info:
            pathops.slice_path("abcdef", start, stop)
        assert exc_info.value.start == start
        assert exc_info.value.stop == stop

    def test_slice_error_is_value_error(self) -> None:
        """SliceRangeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            pathops.slice_path("", 0, 1)


class TestRemovePrefix:
    """Tests for remove_prefix."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("./this", "this"),
            ("////this", "/this"),
            (".//this", "this"),
            ("/this", "/this"),
            ("this", "this"),
            ("./", ""),
            ("//", "/"),
            ("/", "/"),
            ("a", "a"),
            ("", ""),
        ],
    )
    def test_remove_prefix(self, path: str, expected: str) -> None:
        """Leading ./ and redundant separators are removed."""
        assert pathops.remove_prefix(path) == expected

    def test_remove_prefix_respects_length(self) -> None:
        """Only the first ``length`` characters are considered."""
        assert pathops.remove_prefix("./abc/def", 5) == "abc"


class TestRemoveSuffix:
    """Tests for remove_suffix."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("this////", "this"),
            ("this/", "this"),
            ("/a/b/", "/a/b"),
            ("a//b", "a//b"),
            ("/", "/"),
            ("a", "a"),
        ],
    )
    def test_remove_suffix(self, path: str, expected: str) -> None:
        """Every trailing separator is removed."""
        assert pathops.remove_suffix(path) == expected

    def test_remove_suffix_respects_length(self) -> None:
        """Only the first ``length`` characters are considered."""
        assert pathops.remove_suffix("abc///xyz", 6) == "abc"

    @pytest.mark.parametrize(
        "path",
        ["././/x//", "////a/b///", "./", "//", ".//./y/", "plain", ""],
    )
    def test_prefix_and_suffix_reach_fixed_point(self, path: str) -> None:
        """Repeated cleaning stops changing the path."""
        current = path
        for _ in range(len(path) + 1):
            cleaned = pathops.remove_suffix(pathops.remove_prefix(current))
            if cleaned == current:
                break
            current = cleaned
        else:
            pytest.fail(f"No fixed point reached for {path!r}")

        assert pathops.remove_suffix(pathops.remove_prefix(current)) == current


class TestJoin:
    """Tests for join."""

    @pytest.mark.parametrize(
        ("paths", "expected"),
        [
            (["a", "b", "c"], "a/b/c"),
            (["./a/", "/b//", "c"], "a/b/c"),
            (["/srv", "data"], "/srv/data"),
            (["/srv/", "/data/"], "/srv/data"),
            (["/", "etc"], "/etc"),
            (["", "a"], "/a"),
            ([".", "a"], "a"),
            (["a", "", "b"], "a/b"),
            (["/"], "/"),
            (["single"], "single"),
            ([], ""),
        ],
    )
    def test_join(self, paths: list[str], expected: str) -> None:
        """Components are cleaned and separated by exactly one separator."""
        assert pathops.join(paths) == expected

    def test_join_accepts_any_iterable(self) -> None:
        """Generators work as well as lists."""
        assert pathops.join(part for part in ("x", "y")) == "x/y"

    def test_join_rejects_overlong_result(self) -> None:
        """A joined path longer than MAX_PATH_LENGTH raises instead of truncating."""
        half = "a" * (pathops.MAX_PATH_LENGTH // 2)
        with pytest.raises(PathTooLongError) as exc_info:
            pathops.join([half, half, "b"])
        assert exc_info.value.limit == pathops.MAX_PATH_LENGTH

    def test_join_at_limit_is_accepted(self) -> None:
        """A result of exactly MAX_PATH_LENGTH characters is fine."""
        head = "a" * (pathops.MAX_PATH_LENGTH - 2)
        assert len(pathops.join([head, "b"])) == pathops.MAX_PATH_LENGTH


class TestSplit:
    """Tests for split."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/this/is/a/path", ["", "this", "is", "a", "path"]),
            ("this/is/", ["this", "is", ""]),
            ("a//b", ["a", "", "b"]),
            ("name", ["name"]),
            ("", [""]),
        ],
    )
    def test_split(self, path: str, expected: list[str]) -> None:
        """One segment per separator plus a final, possibly empty, segment."""
        assert pathops.split(path) == expected

    def test_split_respects_length(self) -> None:
        """Only the first ``length`` characters are split."""
        assert pathops.split("a/b/c", 3) == ["a", "b"]

    def test_split_rejects_overlong_segment(self) -> None:
        """Segments longer than MAX_NAME_LENGTH raise PathTooLongError."""
        with pytest.raises(PathTooLongError):
            pathops.split("dir/" + "x" * (pathops.MAX_NAME_LENGTH + 1))

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/c", "a/b/c"),
            ("/a//b///c/", "/a/b/c"),
            ("./a/b", "a/b"),
            (".//a", "a"),
            ("//", "/"),
            ("/", "/"),
        ],
    )
    def test_split_then_join_normalizes(self, path: str, expected: str) -> None:
        """Joining split segments collapses redundant separators and drops ./."""
        assert pathops.join(pathops.split(path, len(path))) == expected


class TestClassification:
    """Tests for is_dotted and is_hidden."""

    def test_is_dotted(self) -> None:
        """Only . and .. are dotted."""
        assert pathops.is_dotted(".", 1) is True
        assert pathops.is_dotted("..", 2) is True
        assert pathops.is_dotted("...", 3) is False
        assert pathops.is_dotted(".git") is False
        assert pathops.is_dotted("") is False

    def test_is_hidden(self) -> None:
        """Names starting with a dot are hidden."""
        assert pathops.is_hidden(".git", 4) is True
        assert pathops.is_hidden(".hidden/") is True
        assert pathops.is_hidden("git", 3) is False
        assert pathops.is_hidden("", 0) is False


class TestReplaceGrandparent:
    """Tests for replace_grandparent."""

    def test_absolute_path_is_rerooted(self) -> None:
        """The head segment of an absolute path is replaced."""
        assert pathops.replace_grandparent("/old/mid/leaf", "/new", 13) == "/new/mid/leaf"

    def test_relative_path_is_rerooted(self) -> None:
        """The head segment of a relative path is replaced."""
        assert (
            pathops.replace_grandparent("this/is/a/path", "/new/head") == "/new/head/is/a/path"
        )

    @pytest.mark.parametrize("path", ["ab", "/old", "leaf", ""])
    def test_short_or_single_segment_unchanged(self, path: str) -> None:
        """Paths without a segment below the head are returned as-is."""
        assert pathops.replace_grandparent(path, "/new") == path

    def test_trailing_separator_leaves_only_new_head(self) -> None:
        """A head followed only by a separator becomes the new head."""
        assert pathops.replace_grandparent("old/", "/new") == "/new"


class TestParent:
    """Tests for parent."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [("/a/b", "/a"), ("/a", "/"), ("a/b/", "a"), ("a", ""), ("", "")],
    )
    def test_parent(self, path: str, expected: str) -> None:
        """Everything before the final segment is returned."""
        assert pathops.parent(path) == expected
