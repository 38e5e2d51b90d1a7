"""Logging setup.

Every record is stamped with the generation it belongs to: the job (or batch run) id, the
document type and the step, e.g. ``planning`` or ``section:3/9``.
"""

from __future__ import annotations

import contextlib
import contextvars
import dataclasses
import logging
from collections.abc import Iterator
from typing import Any

from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)s job=%(job_id)s doc=%(doc_type)s step=%(step)s %(name)s: %(message)s"


@dataclasses.dataclass(frozen=True)
class GenerationLogContext:
    job_id: str = "-"
    doc_type: str = "-"
    step: str = "-"


_context: contextvars.ContextVar[GenerationLogContext] = contextvars.ContextVar(
    "docsagent_log_context", default=GenerationLogContext()
)


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        ctx = _context.get()
        record.job_id = ctx.job_id  # type: ignore[attr-defined]
        record.doc_type = ctx.doc_type  # type: ignore[attr-defined]
        record.step = ctx.step  # type: ignore[attr-defined]
        return True


def section_step(index: int, total: int, phase: str = "section") -> str:
    """Step label for the zero-based section ``index`` of ``total``."""

    return f"{phase}:{index + 1}/{total}"


def current_context() -> GenerationLogContext:
    return _context.get()


@contextlib.contextmanager
def job_context(*, job_id: str, doc_type: str | None = None, step: str | None = None) -> Iterator[None]:
    """Bind a generation to every record logged inside the block.

    Fields left as ``None`` keep their enclosing value.
    """

    outer = _context.get()
    token = _context.set(
        GenerationLogContext(
            job_id=job_id,
            doc_type=doc_type or outer.doc_type,
            step=step or outer.step,
        )
    )
    try:
        yield
    finally:
        _context.reset(token)


def set_step(step: str) -> None:
    _context.set(dataclasses.replace(_context.get(), step=step))


def configure_logging(level: str = "INFO") -> None:
    """Install a single RichHandler on the root logger; repeat calls only reset the level."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(h, RichHandler) for h in root.handlers):
        return

    handler = RichHandler(rich_tracebacks=True, show_time=True, show_level=True)
    handler.addFilter(_ContextFilter())
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log the active exception, appending ``context`` as ``key=value`` pairs."""

    if context:
        pairs = " ".join(f"{k}={v}" for k, v in sorted(context.items()))
        logger.exception("%s (%s)", msg, pairs)
    else:
        logger.exception("%s", msg)
