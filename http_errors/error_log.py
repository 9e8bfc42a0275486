"""Plain-text serialization of an error chain for the error log."""

import logging

from .payload import ErrorRecord, iter_chain

log = logging.getLogger('http_errors')

REMINDER = 'View in rendered output by enabling the "display_error_details" setting.'


def render_record_text(record: ErrorRecord) -> str:
    """Render one record as ``Field: value`` lines, skipping empty fields."""
    lines = [f'Type: {record.type}']
    if record.code:
        lines.append(f'Code: {record.code}')
    if record.message:
        lines.append(f'Message: {record.message}')
    if record.file:
        lines.append(f'File: {record.file}')
    if record.line:
        lines.append(f'Line: {record.line}')
    if record.trace:
        lines.append(f'Trace: {record.trace}')
    return '\n'.join(lines)


class ErrorLogger:
    """Writes an exception chain to a logger at error level.

    :param logger: Object with an ``error`` method (e.g. ``app.logger``).
                   Falls back to the ``http_errors`` logger.
    :param prefix: First line of every logged block.
    """

    def __init__(self, logger=None, prefix: str = 'Application Error:'):
        self.logger = logger
        self.prefix = prefix

    def render_text(self, exc: BaseException) -> str:
        return render_record_text(ErrorRecord.from_exception(exc))

    def format_chain(self, exc: BaseException) -> str:
        parts = []
        for i, e in enumerate(iter_chain(exc)):
            if i:
                parts.append('Previous error:')
            parts.append(self.render_text(e))
        return '\n'.join([self.prefix, *parts, REMINDER])

    def write(self, exc: BaseException) -> str:
        message = self.format_chain(exc)
        error = getattr(self.logger, 'error', None)
        if callable(error):
            error(message)
        else:
            log.error(message)
        return message


__all__ = ['ErrorLogger', 'render_record_text', 'REMINDER']
