"""Logging setup driven by the `log.*` settings."""

import io
import logging
from importlib import resources
from logging.config import dictConfig, fileConfig
from typing import IO, Optional, Tuple

import yaml
from pythonjsonlogger import jsonlogger

from .base import BaseSettings

DEFAULT_LOGGING_CONFIG_PATH_INI = (
    "didcomm_v2_resolver.config:default_logging_config.ini"
)
LOG_FORMAT_FILE = "%(asctime)s %(levelname)s %(name)s %(message)s"
YAML_SUFFIXES = (".yml", ".yaml")


def load_resource(path: str, encoding: str = None) -> Optional[IO]:
    """
    Open a file from the local filesystem or from inside a python package.

    Args:
        path: Either a filesystem path, or `package:resource` for a file
            shipped in a package
        encoding: Text encoding; the stream is binary when not given

    Returns:
        An open stream, or None when the file does not exist

    """
    package, sep, resource = path.rpartition(":")
    try:
        if not sep:
            return open(path, "r" if encoding else "rb", encoding=encoding)
        stream = resources.files(package).joinpath(resource).open("rb")
    except (OSError, ModuleNotFoundError):
        return None
    return io.TextIOWrapper(stream, encoding=encoding) if encoding else stream


class LoggingConfigurator:
    """Configures the logging of an application embedding the resolver."""

    default_config_path_ini = DEFAULT_LOGGING_CONFIG_PATH_INI

    @classmethod
    def configure(
        cls,
        log_config_path: str = None,
        log_level: str = None,
        log_file: str = None,
    ):
        """
        Configure the root logger.

        Args:
            log_config_path: INI or YAML logging config; the packaged INI
                config when not given
            log_level: Level applied to the root logger after the config
            log_file: File receiving each record as a JSON object

        """
        log_config_path = log_config_path or cls.default_config_path_ini
        log_config, is_dict_config = cls._load_log_config(log_config_path)

        if not log_config:
            logging.basicConfig(level=logging.WARNING)
            logging.root.warning(f"Logging config file not found: {log_config_path}")
        elif is_dict_config:
            dictConfig(log_config)
        else:
            with log_config:
                fileConfig(log_config, disable_existing_loggers=False)

        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT_FILE))
            logging.root.addHandler(file_handler)

        if log_level:
            logging.root.setLevel(log_level.upper())

    @classmethod
    def configure_from_settings(cls, settings: BaseSettings):
        """Configure logging from `log.config`, `log.level` and `log.file`."""
        cls.configure(
            log_config_path=settings.get_str("log.config"),
            log_level=settings.get_str("log.level"),
            log_file=settings.get_str("log.file"),
        )

    @classmethod
    def _load_log_config(cls, log_config_path: str) -> Tuple[object, bool]:
        if log_config_path.endswith(YAML_SUFFIXES):
            stream = load_resource(log_config_path, "utf-8")
            if not stream:
                return None, True
            with stream:
                return yaml.safe_load(stream), True
        return load_resource(log_config_path, "utf-8"), False
