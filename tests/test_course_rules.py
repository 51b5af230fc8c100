"""Tests for the checkup-course scope rule."""

import pytest

from kcheck.file_keys import ELIGIBILITY_REQUIRED
from kcheck.naming import resolve_columns
from kcheck.normalize import map_course_code
from kcheck.rules.course import evaluate_course_exclusions, is_in_scope


@pytest.mark.parametrize("code", ["19", "20", "21", " 20 ", "１９", "２１"])
def test_in_scope(code):
    assert is_in_scope(code)


@pytest.mark.parametrize("code", ["22", "18", "", "1", "190", None])
def test_out_of_scope(code):
    assert not is_in_scope(code)


def test_exclusions_split_rows(ledger_df):
    columns = resolve_columns(ledger_df.columns, ELIGIBILITY_REQUIRED)
    remains, excluded = evaluate_course_exclusions(ledger_df, columns)
    assert len(remains) == 2
    assert len(excluded) == 1
    assert excluded.iloc[0]["受診者名"] == "鈴木　一郎"
    # 元の並び順を保つ
    assert list(remains["受診者名"]) == ["山田　太郎", "佐藤　花子"]


@pytest.mark.parametrize("code", ["19", "１９", " 21 ", "22", "２２"])
def test_filter_agrees_with_course_mapping(code):
    """Every code the filter keeps has a course mapping, and vice versa."""
    assert is_in_scope(code) == (map_course_code(code) != "")
