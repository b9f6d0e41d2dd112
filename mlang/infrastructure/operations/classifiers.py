"""Error classifiers for I/O exceptions.

Converts exceptions raised while downloading, writing or parsing language
files into standardized OperationResult objects so the loader never lets
them escape.

Key Functions:
- classify_request_error(): requests exceptions → OperationResult (FetchError)
- classify_os_error(): local file system errors → OperationResult (PersistError)

Usage:
    from mlang.infrastructure.operations.classifiers import classify_request_error

    try:
        response = requests.get(url, stream=True, timeout=(10, 30))
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_request_error(exc)
"""

from typing import Optional

import requests

from mlang.infrastructure.operations.result import OperationResult
from mlang.infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER_SECONDS = 60


def classify_request_error(exc: Exception) -> OperationResult:
    """Classify a requests exception into an OperationResult.

    Status Code Mapping:
    - Timeout: TRANSIENT_ERROR (FETCH_TIMEOUT)
    - Connection failure: TRANSIENT_ERROR (FETCH_CONNECTION_ERROR)
    - 429: TRANSIENT_ERROR with retry_after (FETCH_RATE_LIMITED)
    - 401/403: UNAUTHORIZED (FETCH_UNAUTHORIZED)
    - 404: NOT_FOUND (FETCH_NOT_FOUND)
    - 5xx: TRANSIENT_ERROR (FETCH_SERVER_ERROR)
    - Other 4xx: PERMANENT_ERROR (FETCH_HTTP_ERROR)
    - Anything else: TRANSIENT_ERROR (FETCH_ERROR)

    Args:
        exc: Exception raised by requests

    Returns:
        OperationResult with appropriate status, message, error_code, and
        retry_after (if applicable)
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Timed out fetching language file: {exc}",
            error_code="FETCH_TIMEOUT",
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {exc}",
            error_code="FETCH_CONNECTION_ERROR",
        )

    if not isinstance(exc, requests.HTTPError):
        return OperationResult.transient_error(
            f"Request failed: {type(exc).__name__}: {exc}",
            error_code="FETCH_ERROR",
        )

    response = getattr(exc, "response", None)
    status_code: Optional[int] = getattr(response, "status_code", None)

    if status_code == 429:
        retry_after = DEFAULT_RETRY_AFTER_SECONDS
        header_value = (
            response.headers.get("Retry-After") if response is not None else None
        )
        if header_value:
            try:
                retry_after = int(header_value)
            except (ValueError, TypeError):
                pass  # Use default if header is malformed

        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "Asset server rate limited",
            error_code="FETCH_RATE_LIMITED",
            retry_after=retry_after,
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Asset server denied access ({status_code})",
            error_code="FETCH_UNAUTHORIZED",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "Language file not found on asset server",
            error_code="FETCH_NOT_FOUND",
        )

    if status_code and 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Asset server error ({status_code})",
            error_code="FETCH_SERVER_ERROR",
        )

    return OperationResult.permanent_error(
        f"Asset server returned an error ({status_code}): {exc}",
        error_code="FETCH_HTTP_ERROR",
    )


def classify_os_error(exc: OSError) -> OperationResult:
    """Classify a local file system error into an OperationResult.

    Args:
        exc: OSError raised while writing or moving a language file

    Returns:
        PERMANENT_ERROR OperationResult with PERSIST_ERROR code
    """
    return OperationResult.permanent_error(
        f"Failed to write language file: {type(exc).__name__}: {exc}",
        error_code="PERSIST_ERROR",
    )
