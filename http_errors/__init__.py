"""Content-negotiated error responses for Flask/werkzeug applications."""

from .content_type import KNOWN_CONTENT_TYPES, determine_content_type, determine_request_content_type
from .error_log import ErrorLogger
from .error_renderer import ErrorRenderer
from .exceptions import UnsupportedContentType
from .flask_handlers import install_error_handlers
from .not_allowed import NotAllowed
from .payload import ErrorRecord, collect_records, iter_chain
from .settings import RenderOptions

__all__ = [
    'KNOWN_CONTENT_TYPES', 'determine_content_type', 'determine_request_content_type',
    'ErrorLogger', 'ErrorRenderer', 'UnsupportedContentType', 'install_error_handlers',
    'NotAllowed', 'ErrorRecord', 'collect_records', 'iter_chain', 'RenderOptions',
]
