"""Supabase HTTP client for applicant activity records"""

import httpx
from datetime import datetime
from typing import Any, Dict, List, Optional
from moro_scoring.domain.models import Account, Operation, Project, SavingsGoal
from moro_scoring.domain.exceptions import DataAccessError
from moro_scoring.config import settings


class DataStoreClient:
    """Read-only client for the platform's auth store and PostgREST tables"""

    def __init__(
        self,
        base_url: str | None = None,
        service_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.data_store_url).rstrip("/")
        self.service_key = service_key if service_key is not None else settings.data_store_service_key
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.service_key,
            "Authorization": f"Bearer {self.service_key}",
            "Accept": "application/json",
        }

    async def _get(self, path: str, params: Dict[str, str] | None = None, allow_not_found: bool = False) -> Any:
        """
        GET a JSON document from the data store.

        Returns None on 404 when allow_not_found is set.

        Raises:
            DataAccessError: On timeout, transport failure, HTTP errors, or non-JSON body
        """
        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(path, params=params)
                if allow_not_found and response.status_code == 404:
                    return None
                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException as e:
                raise DataAccessError(f"Data store timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise DataAccessError(f"Data store error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DataAccessError(f"Data store unreachable: {e}") from e
            except ValueError as e:
                raise DataAccessError(f"Invalid JSON from data store: {e}") from e

    async def _select(self, table: str, applicant_id: str, columns: str) -> List[Dict[str, Any]]:
        rows = await self._get(
            f"/rest/v1/{table}",
            params={"user_id": f"eq.{applicant_id}", "select": columns},
        )
        if not isinstance(rows, list):
            raise DataAccessError(f"Invalid {table} data from data store: expected a list")
        return rows

    async def get_account(self, applicant_id: str) -> Optional[Account]:
        """Fetch the applicant's auth record, or None if the account does not exist"""
        data = await self._get(f"/auth/v1/admin/users/{applicant_id}", allow_not_found=True)
        if data is None:
            return None

        try:
            created_at = data.get("created_at")
            return Account(
                applicant_id=data["id"],
                created_at=datetime.fromisoformat(created_at) if created_at else None,
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise DataAccessError(f"Invalid account data from data store: {e}") from e

    async def get_operations(self, applicant_id: str) -> List[Operation]:
        rows = await self._select("operations", applicant_id, "type,amount")
        try:
            return [Operation(type=row["type"], amount=float(row["amount"])) for row in rows]
        except (KeyError, ValueError, TypeError) as e:
            raise DataAccessError(f"Invalid operation data from data store: {e}") from e

    async def get_projects(self, applicant_id: str) -> List[Project]:
        rows = await self._select("projects", applicant_id, "status")
        try:
            return [Project(status=row["status"]) for row in rows]
        except (KeyError, TypeError) as e:
            raise DataAccessError(f"Invalid project data from data store: {e}") from e

    async def get_savings(self, applicant_id: str) -> List[SavingsGoal]:
        rows = await self._select("savings", applicant_id, "amount")
        try:
            return [SavingsGoal(amount=float(row["amount"] or 0)) for row in rows]
        except (KeyError, ValueError, TypeError) as e:
            raise DataAccessError(f"Invalid savings data from data store: {e}") from e

    async def is_cooperative_member(self, applicant_id: str) -> bool:
        rows = await self._select("cooperative_members", applicant_id, "cooperative_id")
        return len(rows) > 0
