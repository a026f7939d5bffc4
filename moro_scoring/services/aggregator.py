"""Profile aggregation over the data store"""

import asyncio
import logging
from datetime import datetime
from typing import Callable
from moro_scoring.domain.models import ApplicantProfile
from moro_scoring.domain.profile import build_profile
from moro_scoring.domain.exceptions import ApplicantNotFoundError, DomainException
from moro_scoring.infrastructure.clients.data_store import DataStoreClient
from moro_scoring.utils.date_utils import utc_now

logger = logging.getLogger(__name__)


class ProfileAggregator:
    """Assembles an ApplicantProfile from four independent data store reads"""

    def __init__(self, client: DataStoreClient, clock: Callable[[], datetime] = utc_now):
        self.client = client
        self.clock = clock

    async def aggregate(self, applicant_id: str) -> ApplicantProfile:
        """
        Fetch account, operations, projects and savings concurrently and fold them.

        Raises:
            ApplicantNotFoundError: The account does not exist
            DataAccessError: Any read failed or timed out
        """
        # First failure cancels the remaining reads
        try:
            async with asyncio.TaskGroup() as tg:
                account_task = tg.create_task(self.client.get_account(applicant_id))
                operations_task = tg.create_task(self.client.get_operations(applicant_id))
                projects_task = tg.create_task(self.client.get_projects(applicant_id))
                savings_task = tg.create_task(self.client.get_savings(applicant_id))
        except ExceptionGroup as group:
            for error in group.exceptions:
                if isinstance(error, DomainException):
                    raise error
            raise

        account = account_task.result()
        operations = operations_task.result()
        projects = projects_task.result()
        savings = savings_task.result()

        if account is None:
            raise ApplicantNotFoundError(applicant_id)

        if account.created_at is None:
            logger.warning(
                "Account creation date missing, using account age 0",
                extra={"applicant_id": applicant_id},
            )

        return build_profile(account, operations, projects, savings, evaluated_at=self.clock())
