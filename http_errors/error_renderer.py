"""Error handler rendering uncaught exceptions as 500 responses.

The output format follows the request's ``Accept`` header (JSON, XML or
HTML). Exception details are only rendered when ``display_error_details`` is
enabled; the full chain is always written to the error log.
"""

import json
from dataclasses import replace

from markupsafe import escape

from . import templates
from .content_type import HTML, JSON, TEXT_XML, XML, determine_request_content_type
from .error_log import ErrorLogger
from .exceptions import UnsupportedContentType
from .payload import ErrorRecord, collect_records
from .response import build_response
from .settings import RenderOptions

TITLE = 'Application Runtime Error'


def cdata(content: str) -> str:
    """Wrap ``content`` in a CDATA section, splitting any ``]]>`` it contains."""
    return '<![CDATA[%s]]>' % content.replace(']]>', ']]]]><![CDATA[>')


class ErrorRenderer:
    """Callable turning ``(request, response, exc)`` into a 500 response.

    :param options: :class:`RenderOptions` (default: everything off).
    :param logger: Logger with an ``error`` method, see :class:`ErrorLogger`.
    """

    status = 500

    def __init__(self, options: RenderOptions | None = None, logger=None):
        self.options = options or RenderOptions()
        self.error_log = ErrorLogger(logger)

    @property
    def display_error_details(self) -> bool:
        return self.options.display_error_details

    def __call__(self, request, response, exc: BaseException):
        content_type = determine_request_content_type(request)
        output = self.render_body(content_type, exc)
        self.error_log.write(exc)
        return build_response(response, self.status, content_type, output)

    def render_body(self, content_type: str, exc: BaseException) -> str:
        if content_type == JSON:
            return self.render_json(exc)
        if content_type in (XML, TEXT_XML):
            return self.render_xml(exc)
        if content_type == HTML:
            return self.render_html(exc)
        raise UnsupportedContentType(content_type)

    def render_json(self, exc: BaseException) -> str:
        payload = {'message': f'{TITLE}(from {type(exc).__name__})'}
        if self.display_error_details:
            payload['exception'] = [r.to_dict() for r in collect_records(exc)]
        return json.dumps(payload, indent=4)

    def render_xml(self, exc: BaseException) -> str:
        xml = f'<error>\n  <message>{TITLE}</message>\n'
        if self.display_error_details:
            for record in collect_records(exc):
                xml += '  <error>\n'
                xml += f'    <type>{escape(record.type)}</type>\n'
                xml += f'    <code>{record.code}</code>\n'
                xml += f'    <message>{cdata(record.message)}</message>\n'
                xml += f'    <file>{escape(record.file)}</file>\n'
                xml += f'    <line>{record.line}</line>\n'
                xml += f'    <trace>{cdata(record.trace)}</trace>\n'
                xml += '  </error>\n'
        xml += '</error>'
        return xml

    def redact_record(self, record: ErrorRecord) -> ErrorRecord:
        """Redact the root path from a record before it is HTML-escaped."""
        redact = self.options.redact
        return replace(
            record,
            message=redact(record.message),
            file=redact(record.file),
            trace=redact(record.trace),
        )

    def render_html(self, exc: BaseException) -> str:
        records = ()
        if self.display_error_details:
            records = tuple(self.redact_record(r) for r in collect_records(exc))
        html = templates.render('error.html', title=TITLE, records=records)
        return self.options.redact(html)


__all__ = ['ErrorRenderer', 'cdata', 'TITLE']
