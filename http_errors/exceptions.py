"""Exceptions raised by the error presentation layer itself."""


class UnsupportedContentType(ValueError):
    """Raised when a handler is asked to render a content type it has no renderer for.

    Only reachable when the resolver and a renderer disagree on the set of
    known content types.
    """

    def __init__(self, content_type: str):
        super().__init__(f'Cannot render unknown content type {content_type}')
        self.content_type = content_type


__all__ = ['UnsupportedContentType']
