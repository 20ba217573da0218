"""
Custom Exception Hierarchy
Error kinds surfaced to callers of the data-access layer
"""


class DomainException(Exception):
    """Base exception for all domain errors"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BadRequestException(DomainException):
    """Caller-supplied data is invalid for the requested operation"""
    pass


class DuplicateResourceException(BadRequestException):
    """Resource already exists"""

    def __init__(self, resource_type: str, field: str, value: str):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(f"{resource_type} with {field}='{value}' already exists")


class NotFoundException(DomainException):
    """Requested resource not found"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")
