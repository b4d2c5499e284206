"""Manage configuration settings for the date field and its demo editor."""

import argparse
import dataclasses
import enum
import pathlib
import tomllib
from typing import Any, Optional


CONFIG_FILE_NAME = "blockdate.toml"


class ConfigError(Exception):
    """Errors when setting or accessing settings."""

    class ErrorType(enum.Enum):
        NOT_A_FILE = 1
        PATH_DOES_NOT_EXIST = 2
        INVALID_TOML = 3

    error_type: ErrorType

    def __init__(self, message: str, error_type: ErrorType) -> None:
        """Set error type."""
        super().__init__(message)
        self.error_type = error_type


@dataclasses.dataclass
class Settings:
    """Configuration data for the date field.

    allow_none and show_week_num are passed to every calendar widget the
    overlay creates. initial_dates seeds the blocks shown by the demo editor.
    """

    config_path: Optional[pathlib.Path] = None
    language: str = "en"
    rtl: bool = False
    allow_none: bool = False
    show_week_num: bool = False
    initial_dates: list[Optional[str]] = dataclasses.field(
        default_factory=lambda: [None]
    )

    def update_from_args(self, args: argparse.Namespace) -> None:
        """Read the config file named in args, then apply other overrides."""
        config_path = getattr(args, "config_path", None)
        self.config_path = self._get_full_path(config_path, CONFIG_FILE_NAME)
        if self.config_path is not None:
            self._read_config_file()
        language = getattr(args, "language", None)
        if language:
            self.language = language
        date = getattr(args, "date", None)
        if date:
            self.initial_dates = [date]

    @staticmethod
    def _get_full_path(
        path: Optional[pathlib.Path], default_file_name: str
    ) -> Optional[pathlib.Path]:
        """Convert path arg to full filesystem path.

        If path is None, looks for the default file in the current working
        directory and returns None if it is not there. An explicit path that
        does not point to an existing file raises ConfigError.
        """
        cwd = pathlib.Path.cwd()
        if path is None:
            full_path = cwd / default_file_name
            return full_path if full_path.is_file() else None
        full_path = path if path.is_absolute() else cwd / path
        if not full_path.exists():
            raise ConfigError(
                f"Config file {full_path} does not exist.",
                ConfigError.ErrorType.PATH_DOES_NOT_EXIST,
            )
        if not full_path.is_file():
            raise ConfigError(
                f"Config path {full_path} is not a file.",
                ConfigError.ErrorType.NOT_A_FILE,
            )
        return full_path

    def _read_config_file(self) -> None:
        """Read TOML configuration file."""
        if self.config_path is None:
            return
        app_settings = dataclasses.asdict(self)
        try:
            with open(self.config_path, "rb") as toml_file:
                file_settings = tomllib.load(toml_file)
        except tomllib.TOMLDecodeError as err:
            raise ConfigError(
                f"Unable to parse {self.config_path}: {err}",
                ConfigError.ErrorType.INVALID_TOML,
            ) from err
        for setting_name, value in file_settings.items():
            if setting_name not in app_settings or setting_name == "config_path":
                continue
            setattr(self, setting_name, self._convert_value(value))
        self.language = self.language or "en"

    @staticmethod
    def _convert_value(value: Any) -> Any:
        """TOML has no null, so treat 'none', 'null' and '' as None."""
        if isinstance(value, str) and value.lower() in ["", "none", "null"]:
            return None
        if isinstance(value, list):
            return [Settings._convert_value(item) for item in value]
        return value


# Store settings in a module-level variable, which will be available from any
# other module that imports blockdate.config.
settings = Settings()
