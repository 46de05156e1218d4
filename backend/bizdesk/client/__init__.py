from bizdesk.client.api_client import ApiError, BizdeskApiClient
from bizdesk.client.views import FinancialSummaryView, ProjectView, TransactionView

__all__ = [
    "ApiError",
    "BizdeskApiClient",
    "FinancialSummaryView",
    "ProjectView",
    "TransactionView",
]
