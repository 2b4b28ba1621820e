"""Unit tests for the argument parser module in treesketch CLI."""

from pathlib import Path

import pytest

from treesketch.cli.argparser import collect_ignore_names, create_parser, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_defaults(parser):
    args = parser.parse_args(["some/dir"])
    assert args.directory == Path("some/dir")
    assert args.load is None
    assert args.ignore == []
    assert args.ignore_list is None
    assert args.no_default_ignores is False
    assert args.use_gitignore is False
    assert args.ignore_file_name == ".gitignore"
    assert args.format == "ascii"
    assert args.output is None
    assert args.verbose == 0


def test_all_options(parser):
    args = parser.parse_args(
        ["-i", "dist", "--ignore", "build", "--ignore-list", "a, b", "-D", "-g"]
        + ["-f", "list", "-o", "out.txt", "-vv", "d"]
    )
    assert args.ignore == ["dist", "build"]
    assert args.ignore_list == "a, b"
    assert args.no_default_ignores is True
    assert args.use_gitignore is True
    assert args.format == "list"
    assert args.output == Path("out.txt")
    assert args.verbose == 2


def test_invalid_format(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-f", "xml", "d"])
    assert excinfo.value.code == 2


def test_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("treesketch ")


def test_validate_requires_a_source(parser):
    with pytest.raises(ValueError, match="either a directory or --load"):
        validate_args(parser.parse_args([]))


def test_validate_rejects_two_sources(parser):
    with pytest.raises(ValueError, match="cannot be combined"):
        validate_args(parser.parse_args(["--load", "tree.json", "d"]))


def test_validate_accepts_load_alone(parser):
    validate_args(parser.parse_args(["--load", "tree.json"]))


def test_collect_ignore_names_merges_sources(parser):
    args = parser.parse_args(["-i", "dist", "-i", " ", "--ignore-list", "build, dist,, .venv", "d"])
    assert collect_ignore_names(args) == [".git", "node_modules", ".DS_Store", "dist", "build", ".venv"]


def test_collect_ignore_names_without_defaults(parser):
    args = parser.parse_args(["-D", "-i", "dist", "d"])
    assert collect_ignore_names(args) == ["dist"]
