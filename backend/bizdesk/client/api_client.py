"""
Async HTTP client for the Bizdesk REST API.
"""

from typing import Any, Dict, List, Optional, Union

import httpx

from bizdesk.client.views import FinancialSummaryView, ProjectView, TransactionView
from bizdesk.core.logging import get_logger
from bizdesk.utils.currency_converter import Currency, parse_currency

logger = get_logger(__name__)


class ApiError(Exception):
    """Non-2xx answer from the API, carrying the server's message."""

    def __init__(self, message: str, status_code: int, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


def _error_message(response: httpx.Response) -> tuple:
    try:
        body = response.json()
    except ValueError:
        body = {}
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"], error.get("details")
    if isinstance(body, dict) and body.get("message"):
        return body["message"], None
    return f"HTTP error! status: {response.status_code}", None


class BizdeskApiClient:
    """
    Client for clients, projects, tasks, finance and users.

    Use as an async context manager, or call ``close()`` when done. Pass
    ``transport`` to talk to an in-process app (``httpx.ASGITransport``).
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000/api",
        currency: Union[Currency, str] = Currency.USD,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.currency = parse_currency(currency)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "BizdeskApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        if not response.is_success:
            message, details = _error_message(response)
            logger.warning(
                "API request failed",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            raise ApiError(message, response.status_code, details)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Clients

    async def list_clients(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/clients")

    async def get_client(self, client_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/clients/{client_id}")

    async def create_client(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/clients", json=data)

    async def update_client(self, client_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/clients/{client_id}", json=data)

    async def delete_client(self, client_id: int) -> None:
        await self._request("DELETE", f"/clients/{client_id}")

    async def get_dashboard_stats(self) -> Dict[str, Any]:
        return await self._request("GET", "/clients/dashboard/stats")

    # Projects

    async def list_projects(self, **filters) -> List[Dict[str, Any]]:
        params = {key: value for key, value in filters.items() if value is not None}
        return await self._request("GET", "/projects", params=params)

    async def get_project(self, project_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/projects/{project_id}")

    async def create_project(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/projects", json=data)

    async def update_project(self, project_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/projects/{project_id}", json=data)

    async def delete_project(self, project_id: int) -> None:
        await self._request("DELETE", f"/projects/{project_id}")

    async def get_project_views(self, **filters) -> List[ProjectView]:
        """Projects converted to the display currency."""
        projects = await self.list_projects(**filters)
        return [ProjectView.from_payload(project, self.currency) for project in projects]

    # Tasks

    async def list_tasks(self, **filters) -> List[Dict[str, Any]]:
        params = {key: value for key, value in filters.items() if value is not None}
        return await self._request("GET", "/tasks", params=params)

    async def get_task(self, task_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/tasks/{task_id}")

    async def create_task(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/tasks", json=data)

    async def update_task(self, task_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/tasks/{task_id}", json=data)

    async def delete_task(self, task_id: int) -> None:
        await self._request("DELETE", f"/tasks/{task_id}")

    # Finance

    async def get_financial_summary(self) -> Dict[str, Any]:
        return await self._request("GET", "/finance/summary")

    async def get_financial_summary_view(self) -> FinancialSummaryView:
        summary = await self.get_financial_summary()
        return FinancialSummaryView.from_payload(summary, self.currency)

    async def list_transactions(
        self,
        type: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        status: Optional[str] = None,
        project_id: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "type": type,
            "startDate": start_date,
            "endDate": end_date,
            "status": status,
            "project_id": project_id,
        }
        # Empty filters are not sent
        params = {key: value for key, value in params.items() if value}
        return await self._request("GET", "/finance/transactions", params=params)

    async def get_transaction_views(self, **filters) -> List[TransactionView]:
        transactions = await self.list_transactions(**filters)
        return [TransactionView.from_payload(transaction, self.currency) for transaction in transactions]

    async def get_project_expenses(self, project_id: int) -> List[Dict[str, Any]]:
        """Expense and invoice transactions of one project."""
        transactions = await self.list_transactions(project_id=project_id)
        return [t for t in transactions if t["type"] in ("expense", "invoice")]

    async def get_transaction(self, transaction_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/finance/transactions/{transaction_id}")

    async def create_transaction(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/finance/transactions", json=data)

    async def update_transaction(self, transaction_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/finance/transactions/{transaction_id}", json=data)

    async def update_transaction_status(self, transaction_id: int, status: str) -> Dict[str, Any]:
        return await self._request("PUT", f"/finance/transactions/{transaction_id}/status", json={"status": status})

    async def delete_transaction(self, transaction_id: int) -> None:
        await self._request("DELETE", f"/finance/transactions/{transaction_id}")

    # Users

    async def list_users(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/users")

    async def get_user(self, user_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/users/{user_id}")

    async def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/users", json=data)

    async def update_user(self, user_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/users/{user_id}", json=data)

    async def delete_user(self, user_id: int) -> None:
        await self._request("DELETE", f"/users/{user_id}")
