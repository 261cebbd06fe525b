"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class OfferSourceError(DomainException):
    """No lender returned a usable offer"""

    pass


class InvalidCriteriaError(DomainException):
    """Recommendation criteria cannot produce a meaningful ranking"""

    pass


class AppointmentNotFoundError(DomainException):
    """Requested appointment does not exist"""

    pass
