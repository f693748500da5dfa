# phraseforge/shared/resilience.py
from typing import Callable, Tuple, Type, TypeVar

import httpx
import structlog
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = structlog.get_logger()

F = TypeVar("F", bound=Callable)

# Only transport-level failures are transient; HTTP error statuses are not retried.
TRANSIENT_ERRORS: Tuple[Type[BaseException], ...] = (httpx.TransportError,)


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "download_retry",
        attempt=retry_state.attempt_number,
        error=str(exc),
        sleep=retry_state.next_action.sleep if retry_state.next_action else 0,
    )


def retry_download(attempts: int = 3, backoff: float = 1.0) -> Callable[[F], F]:
    """
    Retry policy for source downloads.
    Strategy:
    - Wait: Exponential Backoff (backoff, 2*backoff, 4*backoff...) up to 10s.
    - Stop: After `attempts` attempts, re-raising the last error.
    - Log: Each retry as a structlog warning.
    """
    return retry(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=backoff, min=0, max=10),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=_log_retry,
        reraise=True,
    )
