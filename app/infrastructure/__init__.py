"""Infrastructure modules for the café directory.

Centralized infrastructure components:
- configuration: Settings management (Settings and its sections)
- i18n: Locales, path helpers and translation tables
- logging: Structured logging and request context
- operations: Operation results and statuses
- security: Access token validation (import from infrastructure.security)
- services: Dependency injection services (import from infrastructure.services)

security and services depend on integrations, which import this package, so
they are not re-exported here.
"""

# Configuration
from infrastructure.configuration import Settings

# Observability
from infrastructure.logging import get_module_logger

# Operations
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    # Configuration
    "Settings",
    # Observability
    "get_module_logger",
    # Operations
    "OperationResult",
    "OperationStatus",
]
