"""Base service class for domain services."""

from typing import Any, ClassVar

import logfire


class Service:
    """Base class for all domain services.

    Domain services load what the pure domain functions need through
    repositories and trace each operation as ``<span_prefix>.<operation>``.
    """

    span_prefix: ClassVar[str] = "service"

    def _span(self, operation: str, **attributes: Any):
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
