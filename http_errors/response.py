"""Response construction shared by the handlers."""

from werkzeug.datastructures import Headers
from werkzeug.wrappers import Response

_DROPPED = ('content-type', 'content-length')


def build_response(response, status: int, content_type: str, body: str, headers=None):
    """Return a new response derived from ``response``.

    The given response is left untouched: its headers are copied onto the
    new instance, then status, ``Content-Type``, extra ``headers`` and body
    are applied.

    :param response: Response to derive from, or ``None`` for a fresh one.
    :param status: HTTP status code.
    :param content_type: Exact ``Content-Type`` header value.
    :param body: Response body text.
    :param headers: Extra headers (mapping) to set.
    """
    response_class = type(response) if isinstance(response, Response) else Response
    new_headers = Headers()
    if response is not None:
        for key, value in response.headers.items():
            if key.lower() not in _DROPPED:
                new_headers.add(key, value)
    new_headers['Content-Type'] = content_type
    for key, value in (headers or {}).items():
        new_headers[key] = value
    return response_class(body, status=status, headers=new_headers)


__all__ = ['build_response']
