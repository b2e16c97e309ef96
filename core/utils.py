import concurrent.futures
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, FrozenSet, Iterable, Optional

from core.errors import DependencyUnavailable

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite returns them without tzinfo)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def new_id() -> str:
    """Document ids are opaque 32-char hex strings."""
    return uuid.uuid4().hex


def normalize_certificate_name(name: Any) -> str:
    return str(name).strip().lower()


def normalize_certificates(certificates: Optional[Iterable[Any]]) -> FrozenSet[str]:
    """
    Normalize a certificate collection for case-insensitive comparison.

    Accepts plain names or credential records ({"name": ...}); blank entries
    are dropped.
    """
    if not certificates:
        return frozenset()

    names = set()
    for cert in certificates:
        if isinstance(cert, dict):
            cert = cert.get("name")
        if cert is None:
            continue
        normalized = normalize_certificate_name(cert)
        if normalized:
            names.add(normalized)
    return frozenset(names)


def run_with_timeout(func: Callable[[], Any], timeout_seconds: Optional[float], what: str = "operation") -> Any:
    """
    Run a blocking call bounded by timeout_seconds.

    Raises DependencyUnavailable (retryable) when the call does not finish in
    time. A falsy timeout runs the call inline.
    """
    if not timeout_seconds or timeout_seconds <= 0:
        return func()
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
    future = executor.submit(func)
    try:
        return future.result(timeout=timeout_seconds)
    except concurrent.futures.TimeoutError as exc:
        future.cancel()
        logger.warning(f"{what} timed out after {timeout_seconds}s")
        raise DependencyUnavailable(f"{what} timed out") from exc
    finally:
        executor.shutdown(wait=False)
