import contextlib
import logging

from pydantic import Field, NonNegativeInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENT_PREFIX = "AASET_"
"""
All environment variables are expected to be prefixed with this.
"""

ENV_MAX_RENDER_ITEMS = ENVIRONMENT_PREFIX + "MAX_RENDER_ITEMS"
"""
The environment variable used to set the `max_render_items` setting.
Note: This must match the field name in the `AASetSettings` class.
"""


class AASetSettings(BaseSettings):
    """
    The global settings for aaset.

    To configure a settings value, set the corresponding environment variable with the prefix `AASET_`.
    For example, to set the `max_render_items` setting, set the environment variable
    `AASET_MAX_RENDER_ITEMS`.

    To access the current settings object, please use the `settings()` function.
    """

    model_config = SettingsConfigDict(env_prefix=ENVIRONMENT_PREFIX)

    max_render_items: NonNegativeInt = 0
    """
    The render limit given to new sets when none is passed explicitly. Default: 0 (render all items).
    If you change the field name, you must also update the `ENV_MAX_RENDER_ITEMS` constant.
    """

    log_level: str = Field("INFO")
    """
    The level `setup_logging()` configures when called without one. Default: "INFO".
    """

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


_use_settings_override: AASetSettings | None = None
"""
If not None, the application should use this settings object instead of generating a new one.
"""


def settings() -> AASetSettings:
    """Get the current settings object."""
    if _use_settings_override:
        return _use_settings_override.model_copy()  # prevent side-effects
    return AASetSettings()


@contextlib.contextmanager
def use_settings(s: AASetSettings | None):
    """
    Context manager that overrides the settings with the values set in the provided settings object.
    The new settings are used within the context of the `with` statement.
    After exiting the context, the original settings are restored.

    Parameters
    ----------
    s
        The settings object to use. None stands for the default settings behavior. The default settings
        behavior reads the environment variables every time the settings are accessed.
    """
    global _use_settings_override

    old_settings = (
        _use_settings_override.model_copy() if _use_settings_override else None
    )
    _use_settings_override = s.model_copy() if s else None

    try:
        yield
    finally:
        _use_settings_override = old_settings
