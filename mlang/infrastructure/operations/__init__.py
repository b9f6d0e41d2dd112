"""Operation result types and status enums.

Standardized result types for language loading, including status enums,
the result dataclass, and classifiers for I/O exceptions.
"""

from mlang.infrastructure.operations.classifiers import (
    classify_os_error,
    classify_request_error,
)
from mlang.infrastructure.operations.result import OperationResult
from mlang.infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_request_error",
    "classify_os_error",
]
