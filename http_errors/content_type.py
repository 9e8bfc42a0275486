"""Content type resolution from the ``Accept`` header.

The negotiation is intentionally simple: the header is split on commas and
compared literally against a fixed list of known types. Quality values
(``q=``) and wildcards (``*/*``) are not interpreted.
"""

import re

JSON = 'application/json'
XML = 'application/xml'
TEXT_XML = 'text/xml'
HTML = 'text/html'
PLAIN = 'text/plain'

# Priority order: the first known type present in the header wins.
KNOWN_CONTENT_TYPES = (JSON, XML, TEXT_XML, HTML)

_SUFFIX_RE = re.compile(r'\+(json|xml)')


def determine_content_type(accept_header: str | None, known=KNOWN_CONTENT_TYPES) -> str:
    """Pick the output content type for an ``Accept`` header value.

    :param accept_header: Raw ``Accept`` header (may be empty or ``None``).
    :param known: Supported types in priority order.
    :returns: One of ``known``, or ``text/html`` when nothing matches.
    """
    accept_header = accept_header or ''
    accepted = {part.strip() for part in accept_header.split(',')}
    for content_type in known:
        if content_type in accepted:
            return content_type

    # vendor types such as application/vnd.api+json
    match = _SUFFIX_RE.search(accept_header)
    if match:
        media_type = f'application/{match.group(1)}'
        if media_type in known:
            return media_type

    return HTML


def determine_request_content_type(request, known=KNOWN_CONTENT_TYPES) -> str:
    """Resolve the content type for a werkzeug/Flask request object."""
    return determine_content_type(request.headers.get('Accept', ''), known)


__all__ = [
    'JSON', 'XML', 'TEXT_XML', 'HTML', 'PLAIN', 'KNOWN_CONTENT_TYPES',
    'determine_content_type', 'determine_request_content_type',
]
