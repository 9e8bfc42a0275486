"""Handler for requests whose method the matched route does not accept."""

import json

from markupsafe import escape

from . import templates
from .content_type import HTML, JSON, PLAIN, TEXT_XML, XML, determine_request_content_type
from .exceptions import UnsupportedContentType
from .response import build_response


def join_methods(methods) -> str:
    return ', '.join(methods)


class NotAllowed:
    """Callable turning ``(request, response, methods)`` into a 405 response.

    ``OPTIONS`` requests are answered with 200 and a plain-text list of the
    allowed methods, without looking at the ``Accept`` header. Every response
    carries an ``Allow`` header.
    """

    def __call__(self, request, response, methods):
        methods = list(methods)
        if request.method == 'OPTIONS':
            status = 200
            content_type = PLAIN
            output = self.render_plain(methods)
        else:
            status = 405
            content_type = determine_request_content_type(request)
            output = self.render_body(content_type, methods)
        return build_response(
            response, status, content_type, output,
            headers={'Allow': join_methods(methods)},
        )

    def render_body(self, content_type: str, methods) -> str:
        if content_type == JSON:
            return self.render_json(methods)
        if content_type in (XML, TEXT_XML):
            return self.render_xml(methods)
        if content_type == HTML:
            return self.render_html(methods)
        raise UnsupportedContentType(content_type)

    def render_plain(self, methods) -> str:
        return 'Allowed methods: ' + join_methods(methods)

    def render_json(self, methods) -> str:
        return json.dumps({'message': 'Method not allowed. Must be one of: ' + join_methods(methods)})

    def render_xml(self, methods) -> str:
        allow = escape(join_methods(methods))
        return f'<root><message>Method not allowed. Must be one of: {allow}</message></root>'

    def render_html(self, methods) -> str:
        return templates.render('not_allowed.html', allow=join_methods(methods))


__all__ = ['NotAllowed', 'join_methods']
