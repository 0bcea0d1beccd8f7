"""Tests for ilslogic.logic.summary."""

from ilslogic.currency import DecimalCurrencyFormatter
from ilslogic.logic import get_fine_summary, get_request_summary, get_transaction_summary
from ilslogic.models import FineSummary, RequestSummary, TransactionSummary


class TestFineSummary:
    def test_sums_balances(self):
        summary = get_fine_summary([{"balance": 150}, {"balance": 50}], DecimalCurrencyFormatter())
        assert summary == FineSummary(total=200, display="$2.00")

    def test_missing_balance_counts_as_zero(self):
        summary = get_fine_summary([{"balance": 125}, {}, {"balance": None}], DecimalCurrencyFormatter())
        assert summary.total == 125
        assert summary.display == "$1.25"

    def test_no_fines(self):
        assert get_fine_summary([], DecimalCurrencyFormatter("EUR")).display == "€0.00"

    def test_uses_given_formatter(self):
        class Plain:
            def convert_to_display_format(self, amount, currency=None):
                return f"{amount:.1f}"

        assert get_fine_summary([{"balance": 250}], Plain()).display == "2.5"


class TestRequestSummary:
    def test_counts_each_bucket(self):
        summary = get_request_summary([{"available": True}, {"in_transit": True}, {}])
        assert summary == RequestSummary(available=1, in_transit=1, other=1)

    def test_available_wins_over_in_transit(self):
        summary = get_request_summary([{"available": True, "in_transit": True}])
        assert summary == RequestSummary(available=1)

    def test_empty(self):
        assert get_request_summary([]) == RequestSummary()


class TestTransactionSummary:
    def test_counts_due_statuses(self):
        summary = get_transaction_summary(
            [{"dueStatus": "due"}, {"dueStatus": "overdue"}, {"dueStatus": "overdue"}, {}]
        )
        assert summary == TransactionSummary(ok=1, overdue=2, warn=1)

    def test_unrecognized_status_is_ok(self):
        assert get_transaction_summary([{"dueStatus": "lost"}]).ok == 1
