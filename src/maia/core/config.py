import logging
import os
import typing as tp

from pydantic import BaseModel, field_validator


def to_log_level(value: tp.Any) -> int:
    """Convert a level name or number to a numeric logging level.

    Accepts every name known to :mod:`logging` (including aliases such as
    ``WARN`` and ``FATAL``), case-insensitively, and non-negative integers
    given either as ``int`` or as a string of digits.

    Raises:
        ValueError: If the value is not a known level name or a non-negative
            integer.
    """
    if isinstance(value, bool):
        raise ValueError(f"Unknown log level '{value}'.")
    if isinstance(value, int):
        level = value
    else:
        text = str(value).strip()
        if text.isdigit():
            level = int(text)
        else:
            level = logging.getLevelName(text.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown log level '{value}'.")
    if level < 0:
        raise ValueError(f"Log level must be non-negative, got {level}.")
    return level


class Settings(BaseModel):
    LOG_LEVEL: int = logging.INFO
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, value: tp.Any) -> int:
        return to_log_level(value)

    @classmethod
    def load(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        ``MAIA_LOG_LEVEL`` takes precedence over ``LOG_LEVEL``. An unknown
        level is reported and replaced by the default so that importing the
        package never fails because of the environment.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("MAIA_LOG_LEVEL", environ.get("LOG_LEVEL"))
        if level is not None:
            try:
                values["LOG_LEVEL"] = to_log_level(level)
            except ValueError as e:
                logging.getLogger(__name__).warning(
                    f"{e} Falling back to {logging.getLevelName(cls().LOG_LEVEL)}."
                )
        if "MAIA_LOG_FORMAT" in environ:
            values["LOG_FORMAT"] = environ["MAIA_LOG_FORMAT"]
        if "MAIA_LOG_DATEFMT" in environ:
            values["LOG_DATEFMT"] = environ["MAIA_LOG_DATEFMT"]

        return cls(**values)


settings = Settings.load()
