"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ApplicantNotFoundError(DomainException):
    """Applicant account does not exist in the data store"""

    def __init__(self, applicant_id: str):
        super().__init__(f"Applicant not found: {applicant_id}")
        self.applicant_id = applicant_id


class DataAccessError(DomainException):
    """Data store read failed, timed out, or returned malformed data"""

    pass


class InvalidInputError(DomainException):
    """Scoring request rejected before any data is read"""

    pass
