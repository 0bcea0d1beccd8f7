from .holds import Holds
from .summary import get_fine_summary, get_request_summary, get_transaction_summary
from .title_holds import TitleHolds

__all__ = [
    "Holds",
    "TitleHolds",
    "get_fine_summary",
    "get_request_summary",
    "get_transaction_summary",
]
