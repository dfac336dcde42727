"""Tests for Path construction, algebra, equality and rendering."""

from __future__ import annotations

import os

import pytest

from duopath.config import defaults
from duopath.fs import Path, PathArgumentError, PathKind
from duopath.fs.grammar import LONG_PATH_PREFIX

POSIX = PathKind.POSIX
WINDOWS = PathKind.WINDOWS


def posix(value: str) -> Path:
    return Path.parse(value, POSIX)


def win(value: str) -> Path:
    return Path.parse(value, WINDOWS)


class TestConstruction:
    """Test parse and direct construction."""

    def test_parse_sets_fields(self):
        p = posix("/dir 1/dir 2/")
        assert p.segments == ("dir 1", "dir 2")
        assert p.is_absolute is True
        assert p.kind is POSIX
        assert p.drive == ""

    def test_parse_windows_keeps_drive(self):
        p = win("c:\\Users\\me")
        assert p.segments == ("Users", "me")
        assert p.is_absolute is True
        assert p.drive == "C"

    def test_default_kind_is_host(self):
        assert Path.parse("a").kind is PathKind.NATIVE.resolve()
        assert Path().kind is PathKind.NATIVE.resolve()

    def test_empty_path(self):
        p = Path()
        assert p.segments == ()
        assert p.is_absolute is False
        assert p.is_empty

    def test_parse_rejects_non_string(self):
        with pytest.raises(PathArgumentError):
            Path.parse(b"/bytes", POSIX)  # type: ignore[arg-type]

    def test_from_segments(self):
        p = Path.from_segments(["a", "b"], WINDOWS, absolute=True, drive="e:")
        assert p == win("E:\\a\\b")

    def test_segments_are_stored_as_tuple(self):
        p = Path(["a", "b"], kind=POSIX)  # type: ignore[arg-type]
        assert p.segments == ("a", "b")

    @pytest.mark.parametrize(
        "segments, kind",
        [
            (("a/b",), POSIX),
            (("a\\b",), WINDOWS),
            (("",), POSIX),
        ],
    )
    def test_invalid_segments_rejected(self, segments, kind):
        with pytest.raises(PathArgumentError):
            Path(segments, kind=kind)

    def test_string_segments_rejected(self):
        with pytest.raises(PathArgumentError, match="not a str"):
            Path("abc", kind=POSIX)  # type: ignore[arg-type]

    def test_windows_absolute_requires_drive(self):
        with pytest.raises(PathArgumentError, match="drive"):
            Path(("a",), True, WINDOWS)

    def test_drive_rejected_outside_absolute_windows(self):
        with pytest.raises(PathArgumentError, match="drive"):
            Path(("a",), False, WINDOWS, "C")
        with pytest.raises(PathArgumentError, match="drive"):
            Path(("a",), True, POSIX, "C")

    def test_immutable(self):
        p = posix("/a")
        with pytest.raises(AttributeError):
            p.segments = ("b",)  # type: ignore[misc]


class TestJoin:
    """Test join and the / operator."""

    def test_join_concatenates_segments(self):
        p, q = posix("/opt/app"), posix("lib/plugin.so")
        joined = p.join(q)
        assert joined.segments == p.segments + q.segments
        assert joined.is_absolute == p.is_absolute
        assert joined.kind is POSIX

    def test_join_relative_base(self):
        assert posix("a/b").join(posix("c")) == posix("a/b/c")

    def test_join_empty_is_identity(self):
        assert posix("/a").join(Path(kind=POSIX)) == posix("/a")
        assert Path(kind=POSIX).join(posix("a")) == posix("a")

    def test_join_rejects_absolute(self):
        for base in (posix("/a"), posix("a"), Path(kind=POSIX)):
            with pytest.raises(PathArgumentError, match="relative"):
                base.join(posix("/etc"))
        with pytest.raises(PathArgumentError, match="relative"):
            win("C:\\a").join(win("D:\\b"))

    def test_join_rejects_kind_mismatch(self):
        with pytest.raises(PathArgumentError, match="windows"):
            win("C:\\a").join(posix("b"))

    def test_join_keeps_windows_drive(self):
        assert (win("D:\\games") / win("saves\\slot1")).render(WINDOWS) == "D:\\games\\saves\\slot1"

    def test_truediv_accepts_str_in_own_grammar(self):
        assert posix("/dir 1/dir 2") / "dir 3" == posix("/dir 1/dir 2/dir 3")
        assert win("C:\\a") / "b/c\\d" == win("C:\\a\\b\\c\\d")

    def test_truediv_with_absolute_str_raises(self):
        with pytest.raises(PathArgumentError):
            posix("/a") / "/b"

    def test_truediv_other_types(self):
        with pytest.raises(TypeError):
            posix("/a") / 3  # type: ignore[operator]

    def test_join_rejects_other_types(self):
        with pytest.raises(PathArgumentError):
            posix("/a").join(3)  # type: ignore[arg-type]


class TestParentFilenameExtension:
    """Test lexical navigation helpers."""

    def test_parent_chain_stops_at_root(self):
        p = posix("/dir 1/dir 2/") / "dir 3"
        assert p.render(POSIX) == "/dir 1/dir 2/dir 3"
        assert p.parent().render(POSIX) == "/dir 1/dir 2"
        assert p.parent().parent().render(POSIX) == "/dir 1"
        assert p.parent().parent().parent().render(POSIX) == "/"
        assert p.parent().parent().parent().parent().render(POSIX) == "/"

    def test_parent_of_empty_absolute_is_idempotent(self):
        root = win("C:\\")
        assert root.parent() == root
        assert root.parent().parent() == root

    def test_parent_of_empty_relative_is_dotdot(self):
        assert Path(kind=POSIX).parent() == posix("..")

    def test_parent_does_not_collapse_dotdot(self):
        assert posix("a/..").parent() == posix("a")
        assert posix("..").parent() == Path(kind=POSIX)

    def test_join_then_parent_roundtrips(self):
        for p in (posix("/a/b"), posix("a"), Path(kind=POSIX), win("C:\\x"), win("rel")):
            assert p.join(Path(("x",), kind=p.kind)).parent() == p

    def test_parent_keeps_drive(self):
        assert win("E:\\a\\b").parent() == win("E:\\a")

    def test_filename(self):
        assert posix("/a/b/file.txt").filename == "file.txt"
        assert posix("/").filename == ""
        assert Path(kind=POSIX).filename == ""

    @pytest.mark.parametrize(
        "name, ext",
        [
            ("archive.tar.gz", "gz"),
            (".gitignore", ""),
            ("noext", ""),
            ("file.", ""),
            (".config.json", "json"),
            ("dir.d/file", ""),
        ],
    )
    def test_extension(self, name, ext):
        assert posix(name).extension == ext

    def test_extension_of_empty_path(self):
        assert Path(kind=POSIX).extension == ""


class TestEquality:
    """Equality is structural."""

    def test_equal_paths(self):
        assert posix("some/path.ext") == posix("some/path.ext")
        assert posix("some//path.ext/") == posix("some/path.ext")

    def test_unequal_paths(self):
        assert posix("some/path.ext") != posix("another/path.ext")

    def test_no_dot_segment_normalization(self):
        assert posix("a/./b") != posix("a/b")
        assert posix("a/../b") != posix("b")

    def test_case_sensitive(self):
        assert win("C:\\Dir") != win("C:\\dir")

    def test_absoluteness_matters(self):
        assert posix("/a") != posix("a")

    def test_kind_matters(self):
        assert posix("a/b") != win("a/b")

    def test_drive_matters(self):
        assert win("C:\\a") != win("D:\\a")

    def test_long_path_prefix_is_not_part_of_identity(self):
        assert win("\\\\?\\C:\\a") == win("C:\\a")

    def test_hashable(self):
        assert len({posix("a/b"), posix("a//b"), posix("a/c")}) == 2


class TestRender:
    """Test rendering and round trips."""

    @pytest.mark.parametrize(
        "raw, kind",
        [
            ("/", POSIX),
            ("", POSIX),
            ("/usr/local/lib/libfoo.so", POSIX),
            ("relative/dir 3", POSIX),
            ("a/./b/..", POSIX),
            ("C:\\", WINDOWS),
            ("C:\\Program Files\\App\\app.exe", WINDOWS),
            ("sub\\dir", WINDOWS),
            ("z:/mixed/separators", WINDOWS),
        ],
    )
    def test_round_trip(self, raw, kind):
        p = Path.parse(raw, kind)
        assert Path.parse(p.render(p.kind), p.kind) == p

    def test_round_trip_long_windows_path(self):
        p = Path(("x" * 150, "y" * 150), True, WINDOWS, "C")
        rendered = p.render(WINDOWS)
        assert rendered.startswith(LONG_PATH_PREFIX)
        assert Path.parse(rendered, WINDOWS) == p

    def test_long_path_limit_follows_settings(self, monkeypatch):
        monkeypatch.setattr(defaults, "settings", defaults.Settings(windows_max_path=12))
        assert win("C:\\abcdefghi").render(WINDOWS) == LONG_PATH_PREFIX + "C:\\abcdefghi"
        assert win("C:\\abcdefgh").render(WINDOWS) == "C:\\abcdefgh"

    def test_cross_grammar_rendering(self):
        assert win("C:\\a\\b").render(POSIX) == "/a/b"
        assert posix("a/b").render(WINDOWS) == "a\\b"

    def test_str_and_fspath_are_native(self):
        p = posix("/a/b") if os.name != "nt" else win("C:\\a\\b")
        assert str(p) == p.render(PathKind.NATIVE)
        assert os.fspath(p) == str(p)

    def test_repr(self):
        assert repr(win("C:\\a")) == "Path('C:\\\\a', kind=windows)"
        assert repr(posix("a/b")) == "Path('a/b', kind=posix)"
