import contextvars
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from s3_put.redaction import redact_text


@dataclass(frozen=True)
class JobScope:
    job_id: str
    execution_id: str = ""


_scope_ctx: contextvars.ContextVar[Optional[JobScope]] = contextvars.ContextVar("s3put_job_scope", default=None)
_logger = logging.getLogger("s3put.obs")


def current_scope() -> Optional[JobScope]:
    return _scope_ctx.get()


@contextmanager
def job_scope(job_id: str, execution_id: str = "") -> Iterator[JobScope]:
    """Tag every ``log_event`` line inside the block with the job and Lambda request."""
    scope = JobScope(job_id=str(job_id), execution_id=execution_id or "")
    token = _scope_ctx.set(scope)
    try:
        yield scope
    finally:
        _scope_ctx.reset(token)


def log_event(event: str, **fields: Any) -> None:
    payload = {"event": event}
    scope = current_scope()
    if scope is not None:
        payload["job_id"] = scope.job_id
        if scope.execution_id:
            payload["execution_id"] = scope.execution_id
    for key, value in fields.items():
        if value is None:
            continue
        payload[key] = redact_text(value) if isinstance(value, str) else value
    parts = [f"{key}={payload[key]}" for key in sorted(payload.keys())]
    _logger.info(" ".join(parts))
