"""Render options for the error handlers.

Environment variables (read by :meth:`RenderOptions.from_env`):

- ``DISPLAY_ERROR_DETAILS``: render exception details (default: off)
- ``ROOT_PATH``: application root path to redact from HTML output
- ``HIDE_ROOT_PATH``: enable root path redaction (default: off)
- ``ROOT_PATH_PLACEHOLDER``: replacement for the root path (default: ``{root}``)
"""

import os
from dataclasses import dataclass, replace

_TRUTHY = {'1', 'true', 'yes', 'on'}


def as_flag(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or '').strip().lower() in _TRUTHY


@dataclass(frozen=True)
class RenderOptions:
    display_error_details: bool = False
    root_path: str = ''
    hide_root_path: bool = False
    root_path_placeholder: str = '{root}'

    @classmethod
    def from_env(cls, environ=None) -> 'RenderOptions':
        """Build options from environment variables.

        :param environ: Mapping to read from (default: ``os.environ``).
        """
        env = os.environ if environ is None else environ
        return cls(
            display_error_details=as_flag(env.get('DISPLAY_ERROR_DETAILS', '0')),
            root_path=env.get('ROOT_PATH', ''),
            hide_root_path=as_flag(env.get('HIDE_ROOT_PATH', '0')),
            root_path_placeholder=env.get('ROOT_PATH_PLACEHOLDER', '{root}'),
        )

    @property
    def redacts_root_path(self) -> bool:
        return bool(self.hide_root_path and self.root_path)

    def redact(self, text: str) -> str:
        """Replace every occurrence of the root path when redaction is on."""
        if not self.redacts_root_path:
            return text
        return text.replace(self.root_path, self.root_path_placeholder)

    def with_changes(self, **changes) -> 'RenderOptions':
        return replace(self, **changes)


__all__ = ['RenderOptions', 'as_flag']
