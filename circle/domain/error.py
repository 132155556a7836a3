"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidArgumentError(ValidationError):
    """Raised when an argument is outside the range an operation accepts."""

    def __init__(self, argument: str, value: object, reason: str):
        self.argument = argument
        self.value = value
        super().__init__(f"Invalid {argument}={value!r}: {reason}")


class UnknownActionTypeError(DomainError):
    """Raised when no point rule exists for an action type."""

    def __init__(self, action_type: object):
        self.action_type = action_type
        super().__init__(f"Unknown action type: {action_type}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
