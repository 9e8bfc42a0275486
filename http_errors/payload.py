"""Flattened view of an exception and its cause chain.

Each exception in a chain is captured as an immutable :class:`ErrorRecord`
holding the fields the renderers and the error log need.
"""

import traceback
from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorRecord:
    """One frame of an error chain."""

    type: str
    code: int = 0
    message: str = ''
    file: str = ''
    line: int = 0
    trace: str = ''

    @classmethod
    def from_exception(cls, exc: BaseException) -> 'ErrorRecord':
        """Capture ``exc`` as a record.

        ``file`` and ``line`` point at the innermost traceback frame, i.e.
        where the exception was raised. An exception that was never raised
        has no traceback and yields empty location fields.
        """
        file, line, trace = '', 0, ''
        tb = exc.__traceback__
        if tb is not None:
            frames = traceback.extract_tb(tb)
            if frames:
                file = frames[-1].filename or ''
                line = frames[-1].lineno or 0
            trace = ''.join(traceback.format_list(frames)).rstrip('\n')
        return cls(
            type=exception_type_name(exc),
            code=exception_code(exc),
            message=str(exc),
            file=file,
            line=line,
            trace=trace,
        )

    def to_dict(self):
        return {
            'type': self.type,
            'code': self.code,
            'message': self.message,
            'file': self.file,
            'line': self.line,
            'trace': self.trace.split('\n'),
        }


def exception_type_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == 'builtins':
        return cls.__qualname__
    return f'{cls.__module__}.{cls.__qualname__}'


def exception_code(exc: BaseException) -> int:
    """Numeric code of an exception: HTTP ``code``, then ``errno``, else 0."""
    for attr in ('code', 'errno'):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0


def previous_exception(exc: BaseException):
    """Return the exception that ``exc`` wraps, or ``None``."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def iter_chain(exc: BaseException):
    """Yield ``exc`` followed by each previous exception until the chain ends."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        seen.add(id(exc))
        yield exc
        exc = previous_exception(exc)


def collect_records(exc: BaseException) -> tuple:
    return tuple(ErrorRecord.from_exception(e) for e in iter_chain(exc))


__all__ = [
    'ErrorRecord', 'exception_type_name', 'exception_code',
    'previous_exception', 'iter_chain', 'collect_records',
]
