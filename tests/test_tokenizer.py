# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Tokenizer behaviour: argument/flag split, extended values, options."""

import logging
import random

import pytest

from cmdline_tokenizer import (
    OptionsError,
    ArgumentRecord,
    ParsedCommandLine,
    Tokenizer,
    TokenizerOptions,
    parse,
)


def test_arguments_and_queries():
    cl = parse('abc "def ghi" "jkl":abcdef', support_extended_arguments=True)

    assert len(cl) == 3
    assert cl[0] == ArgumentRecord(False, "abc", None)
    assert cl[1] == ArgumentRecord(False, "def ghi", None)
    assert cl[2] == ArgumentRecord(False, "jkl", "abcdef")
    assert not cl[0].has_extended_value
    assert cl[2].has_extended_value

    assert cl.has_argument("abc")
    assert not cl.has_flag_argument("abc")
    assert cl.has_argument("def ghi")
    assert cl.has_argument("jkl")

    assert not cl.has_argument("Abc")
    assert cl.has_argument("Abc", ignore_case=True)

    assert cl.get_argument("abc") is cl[0]
    assert cl.get_argument("ABC") is None
    assert cl.get_argument("ABC", True) is cl[0]
    assert cl.get_argument("XYZ", True) is None


def test_flags_are_split_on_every_prefix():
    cl = parse(
        '-a/b/c-d -e:arg/f:arg/g:arg-h:arg -i /j -k:"a b c"/l:"a b c" /m-n-o/p',
        support_extended_arguments=True,
    )

    assert len(cl) == 16
    assert cl.get_arguments() == ()
    assert [a.value for a in cl.get_flag_arguments()] == list("abcdefghijklmnop")
    for name in "abcdefghijklmnop":
        assert cl.has_flag_argument(name)
        assert not cl.has_argument(name)
    assert not cl.has_flag_argument("q")
    assert not cl.has_flag_argument("A")
    assert cl.has_flag_argument("A", True)
    assert cl.get_flag_argument("k").extended_value == "a b c"
    assert cl.get_flag_argument("h").extended_value == "arg"
    assert cl.get_flag_argument("m").extended_value is None


def test_extended_arguments_toggle():
    off = parse("-mode:read -mode2:write")
    assert [(a.value, a.extended_value) for a in off] == [
        ("mode:read", None),
        ("mode2:write", None),
    ]
    assert all(a.is_flag for a in off)

    on = parse("-mode:read -mode2:write", support_extended_arguments=True)
    assert [(a.value, a.extended_value) for a in on] == [
        ("mode", "read"),
        ("mode2", "write"),
    ]
    assert [a.value for a in on.get_flag_arguments()] == ["mode", "mode2"]


def test_quoted_token_is_single_argument():
    (rec,) = parse('"def ghi"')
    assert rec == ArgumentRecord(False, "def ghi")


@pytest.mark.parametrize("text", ["", " ", "\t\n  ", "- / --", '"" \'\''])
def test_nothing_to_parse(text):
    assert len(parse(text, support_extended_arguments=True)) == 0


def test_discard_first_token_is_opt_in():
    text = "app.exe /quiet report.csv"
    kept = parse(text)
    assert [a.value for a in kept] == ["app.exe", "quiet", "report.csv"]

    dropped = parse(text, discard_first_token=True)
    assert [a.value for a in dropped] == ["quiet", "report.csv"]


def test_discard_first_token_drops_leading_flag_too():
    cl = parse("-x y", discard_first_token=True)
    assert list(cl) == [ArgumentRecord(False, "y")]


def test_tokenizer_instance_is_reusable():
    tok = Tokenizer(support_extended_arguments=True)
    first = tok.parse("-a:1 b")
    second = tok.parse("c")
    assert [a.value for a in first] == ["a", "b"]
    assert [a.value for a in second] == ["c"]
    # earlier results are untouched by later parses
    assert first[0].extended_value == "1"


def test_tokenizer_overrides_apply_on_top_of_options():
    base = TokenizerOptions(discard_first_token=True)
    tok = Tokenizer(base, support_extended_arguments=True)
    assert tok.options == TokenizerOptions(True, True)
    assert base.support_extended_arguments is False


def test_parse_returns_immutable_result():
    cl = parse("a -b")
    assert isinstance(cl, ParsedCommandLine)
    assert isinstance(cl.arguments, tuple)
    with pytest.raises(AttributeError):
        cl[0].value = "z"  # type: ignore[misc]


def test_parse_rejects_non_string():
    with pytest.raises(TypeError):
        parse(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        parse(b"-a")  # type: ignore[arg-type]


def test_parse_is_idempotent():
    text = 'x -y:"1 2" /z:3 "w'
    assert parse(text, True) == parse(text, True)
    assert Tokenizer(support_extended_arguments=True).parse(text) == parse(
        text, True
    )


def test_partition_and_termination_on_random_input():
    rng = random.Random(1234)
    alphabet = "ab -/:\"' \t"
    for _ in range(500):
        text = "".join(
            rng.choice(alphabet) for _ in range(rng.randint(0, 30))
        )
        for extended in (False, True):
            cl = parse(text, support_extended_arguments=extended)
            args = cl.get_arguments()
            flags = cl.get_flag_arguments()
            assert len(args) + len(flags) == len(cl)
            assert all(not a.is_flag for a in args)
            assert all(f.is_flag for f in flags)
            assert all(a.value.strip() for a in cl)
            if not extended:
                assert all(a.extended_value is None for a in cl)


def test_parse_logs_debug_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="cmdline_tokenizer"):
        parse("prog -a", discard_first_token=True)
    assert "Parsed 1 argument(s) from 7 char(s)" in caplog.text
    assert "first='prog'" in caplog.text


def test_tokenizer_rejects_non_boolean_overrides():
    with pytest.raises(OptionsError):
        Tokenizer(support_extended_arguments="no")
    with pytest.raises(OptionsError):
        parse("a:b", discard_first_token="yes")  # type: ignore[arg-type]
