import pytest

from ftls.options import Options, UsageError, parse_options


def test_no_arguments_gives_defaults():
    options, operands = parse_options([])
    assert options == Options()
    assert operands == []


@pytest.mark.parametrize(
    "letter, attribute",
    [
        ("R", "recursive"),
        ("r", "reverse"),
        ("l", "long"),
        ("a", "all"),
        ("t", "time"),
        ("1", "one"),
        ("u", "access_time"),
        ("G", "colour"),
        ("g", "no_owner"),
    ],
)
def test_each_letter_sets_its_switch(letter, attribute):
    options, _ = parse_options(["-" + letter])
    assert getattr(options, attribute) is True
    expected = Options()
    setattr(expected, attribute, True)
    assert options == expected


def test_f_turns_off_sorting_and_shows_all():
    options, _ = parse_options(["-f"])
    assert options.no_sort is True
    assert options.all is True


def test_combined_and_separate_groups():
    options, operands = parse_options(["-la", "-R", "dir"])
    assert options.long and options.all and options.recursive
    assert not options.reverse
    assert operands == ["dir"]


def test_operands_start_at_first_non_option():
    options, operands = parse_options(["a", "-l"])
    assert options.long is False
    assert operands == ["a", "-l"]


def test_lone_dash_is_consumed_without_effect():
    options, operands = parse_options(["-", "x"])
    assert options == Options()
    assert operands == ["x"]


def test_options_after_double_dash_still_apply():
    options, operands = parse_options(["--", "-l", "y"])
    assert options.long is True
    assert operands == ["y"]


def test_empty_argument_is_an_operand():
    _, operands = parse_options([""])
    assert operands == [""]


def test_unknown_letter_raises_usage_error():
    with pytest.raises(UsageError) as info:
        parse_options(["-lZ"])
    assert info.value.option == "Z"
    assert "ls: illegal option -- Z" in str(info.value)
    assert "usage: ls [-ABCFGHLOPRSTUWabcdefghiklmnopqrstuwx1] [file ...]" in str(info.value)