# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Query helpers work on any iterable of records, not just parse results."""

from cmdline_tokenizer import ArgumentRecord, query

RECORDS = [
    ArgumentRecord(False, "input.txt"),
    ArgumentRecord(True, "Out", "result.txt"),
    ArgumentRecord(False, "out"),
    ArgumentRecord(True, "out", "second"),
]


def test_flag_and_argument_namespaces_are_separate():
    assert query.has_argument(RECORDS, "out")
    assert query.has_flag_argument(RECORDS, "out")
    assert not query.has_argument(RECORDS, "Out")
    assert query.has_argument(RECORDS, "Out", ignore_case=True)


def test_get_returns_first_match_in_order():
    assert query.get_flag_argument(RECORDS, "out") is RECORDS[3]
    assert query.get_flag_argument(RECORDS, "OUT", True) is RECORDS[1]
    assert query.get_argument(RECORDS, "OUT", True) is RECORDS[2]
    assert query.get_argument(RECORDS, "result.txt") is None


def test_casefold_comparison():
    recs = [ArgumentRecord(True, "STRASSE")]
    assert query.has_flag_argument(recs, "straße", ignore_case=True)
    assert not query.has_flag_argument(recs, "straße")


def test_filters_preserve_order():
    assert query.get_arguments(RECORDS) == (RECORDS[0], RECORDS[2])
    assert query.get_flag_arguments(RECORDS) == (RECORDS[1], RECORDS[3])


def test_empty_sequences():
    assert not query.has_argument([], "x")
    assert query.get_flag_argument([], "x") is None
    assert query.get_arguments([]) == ()
    assert query.get_flag_arguments(iter([])) == ()


def test_record_to_dict():
    assert RECORDS[1].to_dict() == {
        "is_flag": True,
        "value": "Out",
        "extended_value": "result.txt",
    }
    assert RECORDS[0].to_dict()["extended_value"] is None
