import csv
import io

import pytest

from csv2beancount.reader import read_rows
from tests.helpers.ing import ING_CSV, RYANAIR_ROW, SALARY_ROW


def _rows(text: str, **kwargs) -> list[list[str]]:
    return list(read_rows(io.StringIO(text, newline=""), **kwargs))


def test_skip_counts_non_blank_records_only():
    rows = _rows(ING_CSV, skip=10)

    # Ten preamble records dropped; the column header is the first row left.
    assert rows[0][0] == "Buchung"
    assert rows[1] == SALARY_ROW
    assert rows[2] == RYANAIR_ROW
    assert len(rows) == 6


def test_skip_past_header_yields_data_only():
    rows = _rows(ING_CSV, skip=11)
    assert [r[0] for r in rows] == ["26.04.2019", "24.04.2019", "24.04.2019", "23.04.2019", "23.04.2019"]


def test_preamble_width_is_not_checked():
    # The preamble mixes one, two and three column records.
    assert len(_rows(ING_CSV, skip=11, fields=9)) == 5


def test_blank_lines_are_ignored():
    text = "a;b\n\n\nc;d\n\n"
    assert _rows(text) == [["a", "b"], ["c", "d"]]


def test_custom_separator_and_quoting():
    text = 'date,payee,amount\n2019-01-01,"Shop, Inc.","1,50"\n'
    rows = _rows(text, separator=",", skip=1)
    assert rows == [["2019-01-01", "Shop, Inc.", "1,50"]]


def test_inferred_width_rejects_later_mismatch():
    text = "a;b;c\nd;e;f\ng;h\n"
    with pytest.raises(csv.Error, match=r"line 3: wrong number of fields \(got 2, want 3\)"):
        _rows(text)


def test_explicit_width_rejects_first_row():
    with pytest.raises(csv.Error, match="want 4"):
        _rows("a;b;c\n", fields=4)


def test_width_check_can_be_disabled():
    text = "a;b;c\nd\ne;f\n"
    assert _rows(text, fields=-1) == [["a", "b", "c"], ["d"], ["e", "f"]]


def test_rows_are_yielded_lazily():
    rows = read_rows(io.StringIO("a;b\nc\n", newline=""))
    assert next(rows) == ["a", "b"]
    with pytest.raises(csv.Error):
        next(rows)


def test_empty_input_yields_nothing():
    assert _rows("") == []
    assert _rows("only;preamble\n", skip=5) == []
