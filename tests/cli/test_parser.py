from __future__ import annotations

import pytest
from pathkit.cli.parser import ScriptArgumentParser, check_arg_count, render_manual
from pathkit.errors import ScriptError
from pathkit.exit_codes import ERR_INVALID_ARG, ERR_INVALID_FLAG, ERR_MISSING_ARG, ERR_TOO_MANY_ARGS


def _parser() -> ScriptArgumentParser:
    p = ScriptArgumentParser(
        prog="demo",
        summary="demo script",
        description="Does demo things.\n\nSecond paragraph.",
        exit_codes=("OK", "ERR_INVALID_FLAG", "ERR_INTERNAL"),
    )
    p.add_argument("-q", dest="quiet", action="store_true", help="Quiet mode.")
    p.add_argument("-d", dest="delimiter", metavar="delim", default="\n", help="Segment delimiter.")
    p.add_argument("items", nargs="*", metavar="item")
    return p


def test_flags_and_positionals_parse() -> None:
    ns = _parser().parse_args(["-q", "-d", ",", "a", "b"])
    assert ns.quiet is True
    assert ns.delimiter == ","
    assert ns.items == ["a", "b"]


def test_combined_short_flags_parse() -> None:
    ns = _parser().parse_args(["-qd:", "x"])
    assert ns.quiet is True
    assert ns.delimiter == ":"


def test_unknown_flag_is_invalid_flag() -> None:
    with pytest.raises(ScriptError) as exc:
        _parser().parse_args(["-x"])
    assert exc.value.code == ERR_INVALID_FLAG
    assert str(exc.value) == "invalid flag '-x' supplied"


def test_flag_without_value_is_missing_arg() -> None:
    with pytest.raises(ScriptError) as exc:
        _parser().parse_args(["-d"])
    assert exc.value.code == ERR_MISSING_ARG
    assert str(exc.value) == "flag '-d' requires argument"


def test_help_prints_manual_before_other_validation(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        _parser().parse_args(["-h", "-x", "-d"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert out.startswith("NAME\n      demo - demo script\n")
    assert "SYNOPSIS\n      demo [-h] [-q] [-d delim] [item ...]" in out


def test_manual_lists_options_and_exit_codes() -> None:
    manual = render_manual(_parser())
    for section in ("NAME", "SYNOPSIS", "DESCRIPTION", "OPTIONS", "EXIT CODES"):
        assert f"\n{section}\n" in f"\n{manual}"
    assert "      -d <delim>\n          Segment delimiter." in manual
    assert "      -h\n          Get help, print out the manual and exit." in manual
    assert "      Second paragraph." in manual
    assert "      0   command succeeded" in manual
    assert "      255 internal error" in manual
    assert "too many positional" not in manual


def test_check_arg_count() -> None:
    check_arg_count(["a"], 1)
    with pytest.raises(ScriptError) as exc:
        check_arg_count(["a", "b"], 1)
    assert exc.value.code == ERR_TOO_MANY_ARGS
    assert str(exc.value) == "too many arguments supplied (max number: 1)"


def test_flags_may_follow_positionals() -> None:
    ns = _parser().parse_args(["a", "-q", "b", "-d", ",", "c"])
    assert ns.quiet is True
    assert ns.delimiter == ","
    assert ns.items == ["a", "b", "c"]


@pytest.mark.parametrize(
    ("argv", "delimiter", "quiet"),
    [
        (["-d", "->"], "->", False),
        (["-d", "-q"], "-q", False),
        (["-qd", "--x"], "--x", True),
        (["-d->"], "->", False),
        (["-d", ""], "", False),
    ],
)
def test_option_value_is_the_next_word(argv: list[str], delimiter: str, quiet: bool) -> None:
    ns = _parser().parse_args([*argv, "item"])
    assert ns.delimiter == delimiter
    assert ns.quiet is quiet
    assert ns.items == ["item"]


def test_fold_option_values_stops_at_double_dash() -> None:
    assert _parser().fold_option_values(["-q", "--", "-d", "-x"]) == ["-q", "--", "-d", "-x"]
    assert _parser().fold_option_values(["a", "-d", "-x", "b"]) == ["a", "-d-x", "b"]


def test_stray_positional_is_not_reported_as_flag() -> None:
    p = ScriptArgumentParser(prog="demo", summary="demo", description="demo", exit_codes=("OK",))
    with pytest.raises(ScriptError) as exc:
        p.parse_args(["extra"])
    assert exc.value.code == ERR_INVALID_ARG
    assert str(exc.value) == "unexpected argument 'extra' supplied"
    with pytest.raises(ScriptError) as exc:
        p.parse_args(["extra", "-z"])
    assert exc.value.code == ERR_INVALID_FLAG
    assert str(exc.value) == "invalid flag '-z' supplied"
