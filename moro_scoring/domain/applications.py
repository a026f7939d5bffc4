"""Financing application routing"""

from moro_scoring.domain.models import ApplicationStatus


def determine_initial_status(is_cooperative_member: bool) -> ApplicationStatus:
    """Cooperative members are reviewed by their cooperative first, others by platform admins"""
    if is_cooperative_member:
        return ApplicationStatus.SUBMITTED_TO_COOP
    return ApplicationStatus.SUBMITTED_TO_ADMIN
