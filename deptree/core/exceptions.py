"""
Structured Exception System for deptree
=======================================

Exception hierarchy for failures raised at the boundary with the host build
tool. Inside the traversal, failures are captured as data on the affected
dependency node, so these exceptions only travel between a host bridge and the
component that consumes it.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(str, Enum):
    """Error severity levels for categorization."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    RESOLUTION = "resolution"
    DEPENDENCY = "dependency"
    VALIDATION = "validation"
    SYSTEM = "system"


@dataclass
class ErrorContext:
    """Context information for errors."""
    component: str
    operation: str
    start_time: float = field(default_factory=time.time)
    project_name: Optional[str] = None
    configuration_name: Optional[str] = None
    context_data: Dict[str, Any] = field(default_factory=dict)

    def add_diagnostic_data(self, key: str, value: Any) -> None:
        """Add diagnostic data to the context."""
        self.context_data[key] = value


class DependencyTreeException(Exception):
    """
    Base exception class for deptree.

    Carries a category, a severity and the context of the operation that failed.
    The wrapped cause is chained with ``raise ... from`` by callers so that
    cause-chain formatting can walk it.
    """

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        context: Optional[ErrorContext] = None,
        component: Optional[str] = None,
    ):
        super().__init__(message)

        self.message = message
        self.severity = severity
        self.category = category
        self.timestamp = time.time()
        self.component = component or (context.component if context else "unknown")
        self.context = context or ErrorContext(component=self.component, operation="unknown")

        self._log_error()

    def _log_error(self):
        """Log the error at debug level with structured information."""
        logger = logging.getLogger(f"deptree.errors.{self.category.value}")

        log_data = {
            "severity": self.severity.value,
            "category": self.category.value,
            "component": self.context.component,
            "operation": self.context.operation,
        }
        if self.context.configuration_name:
            log_data["configuration_name"] = self.context.configuration_name

        logger.debug(self.message, extra={"extra_fields": log_data})

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "timestamp": self.timestamp,
            "context": {
                "component": self.context.component,
                "operation": self.context.operation,
                "project_name": self.context.project_name,
                "configuration_name": self.context.configuration_name,
                "context_data": self.context.context_data,
            },
        }


class HostVersionError(DependencyTreeException):
    """A host version string could not be parsed."""

    def __init__(self, version: str, **kwargs):
        self.version = version
        kwargs.setdefault("category", ErrorCategory.CONFIGURATION)
        kwargs.setdefault("component", "versions")
        super().__init__(f"Malformed version string: '{version}'", **kwargs)


class ArtifactSetResolutionError(DependencyTreeException):
    """The eagerly-resolved artifact set of a configuration could not be obtained."""

    def __init__(self, configuration_name: str, message: str, **kwargs):
        self.configuration_name = configuration_name
        kwargs.setdefault("category", ErrorCategory.RESOLUTION)
        kwargs.setdefault("severity", ErrorSeverity.LOW)
        kwargs.setdefault(
            "context",
            ErrorContext(
                component="host",
                operation="resolve_artifacts",
                configuration_name=configuration_name,
            ),
        )
        super().__init__(message, **kwargs)
