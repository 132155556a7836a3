"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are inconsistent (e.g. cloud logging without a token)."""

    pass


class DependencyInjectionError(UtilError):
    """Provider wiring cannot be resolved for a component."""

    def __init__(self, message: str, component: str | None = None) -> None:
        self.component = component
        super().__init__(message)
