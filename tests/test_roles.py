"""Tests for insurer/ledger role classification."""

from kcheck.io_utils import CsvLoader
from kcheck.roles import classify_paths, classify_roles
from tests.conftest import INSURER_HEADER, LEDGER_HEADER


class TestClassifyRoles:
    def test_first_is_insurer(self):
        roles = classify_roles(INSURER_HEADER)
        assert roles.insurer == 0
        assert roles.ledger == 1
        assert roles.order("a", "b") == ("a", "b")

    def test_first_is_ledger(self):
        roles = classify_roles(LEDGER_HEADER)
        assert roles.insurer == 1
        assert roles.order("a", "b") == ("b", "a")

    def test_never_raises_without_signature(self):
        assert classify_roles([]).insurer == 1


class TestClassifyPaths:
    def test_order_independent(self, insurer_file, ledger_file):
        """Role assignment depends on content, not argument position."""
        loader = CsvLoader("cp932")
        assert classify_paths(insurer_file, ledger_file, loader) == (insurer_file, ledger_file)
        assert classify_paths(ledger_file, insurer_file, loader) == (insurer_file, ledger_file)
