import os
from pathlib import Path

from apngspec.utils.path import has_extension, resolve_paths, wildcard_regex


def test_wildcard_results_are_sorted(tmp_path: Path, make_files):
    make_files(tmp_path, "b.png", "a.png", "c.png")

    result = resolve_paths("*.png", tmp_path)

    assert result == [str(tmp_path / "a.png"), str(tmp_path / "b.png"), str(tmp_path / "c.png")]


def test_literal_spec_gets_extension_appended(tmp_path: Path):
    assert resolve_paths("frame1", tmp_path) == [str(tmp_path / "frame1.png")]


def test_literal_spec_keeps_existing_extension_any_case(tmp_path: Path):
    assert resolve_paths("frame1.PNG", tmp_path) == [str(tmp_path / "frame1.PNG")]
    assert resolve_paths("frame1.png", tmp_path) == [str(tmp_path / "frame1.png")]


def test_literal_spec_is_not_checked_for_existence(tmp_path: Path):
    result = resolve_paths("nowhere/ghost.png", tmp_path)
    assert result == [str(tmp_path / "nowhere" / "ghost.png")]


def test_relative_spec_is_normalized(tmp_path: Path):
    sub = tmp_path / "sub"
    sub.mkdir()
    assert resolve_paths("../x.png", sub) == [str(tmp_path / "x.png")]


def test_absolute_spec_ignores_base(tmp_path: Path):
    target = tmp_path / "abs.png"
    assert resolve_paths(str(target), "/somewhere/else") == [str(target)]


def test_wildcard_filters_extension_case_insensitively(tmp_path: Path, make_files):
    make_files(tmp_path, "f1.png", "f2.PNG", "f3.jpg", "f4.png.bak")

    result = resolve_paths("f*", tmp_path)

    assert [os.path.basename(p) for p in result] == ["f1.png", "f2.PNG"]


def test_wildcard_needs_at_least_one_character(tmp_path: Path, make_files):
    make_files(tmp_path, "img_.png", "img_1.png")

    result = resolve_paths("img_*.png", tmp_path)

    assert result == [str(tmp_path / "img_1.png")]


def test_wildcard_match_is_case_sensitive(tmp_path: Path, make_files):
    make_files(tmp_path, "walk_1.png", "WALK_2.png")

    result = resolve_paths("walk_*.png", tmp_path)

    assert result == [str(tmp_path / "walk_1.png")]


def test_wildcard_treats_regex_characters_literally(tmp_path: Path, make_files):
    make_files(tmp_path, "a+b(1).png", "aab(1).png")

    result = resolve_paths("a+b(*).png", tmp_path)

    assert result == [str(tmp_path / "a+b(1).png")]


def test_wildcard_skips_directories_and_does_not_recurse(tmp_path: Path, make_files):
    make_files(tmp_path, "top.png")
    (tmp_path / "dir.png").mkdir()
    make_files(tmp_path / "nested", "deep.png")

    result = resolve_paths("*.png", tmp_path)

    assert result == [str(tmp_path / "top.png")]


def test_wildcard_in_missing_directory_is_empty(tmp_path: Path):
    assert resolve_paths("missing/*.png", tmp_path) == []


def test_wildcard_in_directory_component_is_empty(tmp_path: Path, make_files):
    make_files(tmp_path / "d1", "x.png")
    assert resolve_paths("d*/x.png", tmp_path) == []


def test_each_call_returns_a_fresh_list(tmp_path: Path, make_files):
    make_files(tmp_path, "a.png")
    first = resolve_paths("*.png", tmp_path)
    first.append("junk")

    assert resolve_paths("*.png", tmp_path) == [str(tmp_path / "a.png")]


def test_custom_image_extension(tmp_path: Path, make_files):
    make_files(tmp_path, "a.apng", "b.png")

    assert resolve_paths("*", tmp_path, ".apng") == [str(tmp_path / "a.apng")]
    assert resolve_paths("c", tmp_path, ".apng") == [str(tmp_path / "c.apng")]


def test_helpers():
    assert has_extension("/x/Y.PnG", ".png")
    assert not has_extension("/x/y.jpg", ".png")
    assert wildcard_regex("/d/a.*").fullmatch("/d/a.png")
    assert not wildcard_regex("/d/a.*").fullmatch("/d/abpng")
