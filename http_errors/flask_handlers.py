"""Flask integration for the error handlers.

Installs :class:`ErrorRenderer` for uncaught exceptions and
:class:`NotAllowed` for 405 responses on a Flask app.
"""

from flask import request
from werkzeug.exceptions import HTTPException, MethodNotAllowed

from .error_renderer import ErrorRenderer
from .not_allowed import NotAllowed
from .settings import RenderOptions, as_flag


def install_error_handlers(app, options: RenderOptions | None = None, logger=None):
    """Install global error handlers rendering errors in the negotiated format.

    :param app: Flask application.
    :param options: Render options (default: read from the environment).
                    ``app.config['DISPLAY_ERROR_DETAILS']`` overrides the
                    detail flag when set.
    :param logger: Error logger (default: ``app.logger``).
    :returns: ``(error_renderer, not_allowed)`` handler pair.
    """
    if options is None:
        options = RenderOptions.from_env()
    if 'DISPLAY_ERROR_DETAILS' in app.config:
        options = options.with_changes(display_error_details=as_flag(app.config['DISPLAY_ERROR_DETAILS']))

    error_renderer = ErrorRenderer(options, logger if logger is not None else app.logger)
    not_allowed = NotAllowed()

    @app.errorhandler(MethodNotAllowed)
    def _handle_method_not_allowed(err: MethodNotAllowed):
        return not_allowed(request, None, sorted(err.valid_methods or []))

    @app.errorhandler(HTTPException)
    def _handle_http_exception(err: HTTPException):
        # werkzeug renders its own HTTP errors (404, 413, ...)
        return err

    @app.errorhandler(Exception)
    def _handle_unexpected(err: Exception):
        return error_renderer(request, None, err)

    return error_renderer, not_allowed


__all__ = ['install_error_handlers']
