"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanTermsError(DomainException):
    """Loan terms violate principal/rate/tenure bounds"""

    pass


class VariantNotFoundError(DomainException):
    """No catalog variant available to resolve a URL slug against"""

    pass


class UnknownFeePolicyError(DomainException):
    """Requested on-road fee policy is not registered"""

    pass
