"""Operation result types and status enums.

Uniform result types returned by infrastructure calls (database client,
repositories) so that routes can map outcomes to HTTP responses in one place.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
