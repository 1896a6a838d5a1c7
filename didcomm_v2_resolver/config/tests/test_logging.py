from tempfile import NamedTemporaryFile
from unittest import TestCase, mock

from .. import logging as test_module
from ..settings import Settings

YAML_CONFIG = """
version: 1
disable_existing_loggers: false
root:
  level: INFO
"""


class TestLoggingConfigurator(TestCase):
    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_default(self, mock_file_config, mock_load_resource):
        test_module.LoggingConfigurator.configure()

        mock_load_resource.assert_called_once_with(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        )
        mock_file_config.assert_called_once_with(
            mock_load_resource.return_value, disable_existing_loggers=False
        )

    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_with_path(self, mock_file_config, mock_load_resource):
        test_module.LoggingConfigurator.configure("a path")

        mock_load_resource.assert_called_once_with("a path", "utf-8")
        mock_file_config.assert_called_once()

    @mock.patch.object(test_module, "dictConfig", autospec=True)
    def test_configure_yaml(self, mock_dict_config):
        with NamedTemporaryFile("w", suffix=".yml") as config_file:
            config_file.write(YAML_CONFIG)
            config_file.flush()
            test_module.LoggingConfigurator.configure(config_file.name)

        config = mock_dict_config.call_args[0][0]
        assert config["root"]["level"] == "INFO"
        assert config["disable_existing_loggers"] is False

    def test_configure_missing_config_with_file_and_level(self):
        with mock.patch.object(
            test_module, "load_resource", mock.MagicMock(return_value=None)
        ), mock.patch.object(test_module, "logging", mock.MagicMock()) as mock_logging:
            test_module.LoggingConfigurator.configure(
                log_level="error", log_file="resolver.log"
            )

        mock_logging.basicConfig.assert_called_once()
        mock_logging.root.warning.assert_called_once()
        mock_logging.FileHandler.assert_called_once_with(
            "resolver.log", encoding="utf-8"
        )
        mock_logging.root.addHandler.assert_called_once_with(
            mock_logging.FileHandler.return_value
        )
        mock_logging.root.setLevel.assert_called_once_with("ERROR")

    def test_configure_from_settings(self):
        settings = Settings({"log.config": "custom.ini", "log.level": "debug"})
        with mock.patch.object(
            test_module.LoggingConfigurator, "configure"
        ) as mock_configure:
            test_module.LoggingConfigurator.configure_from_settings(settings)

        mock_configure.assert_called_once_with(
            log_config_path="custom.ini", log_level="debug", log_file=None
        )


class TestLoadResource(TestCase):
    def test_load_package_resource(self):
        with test_module.load_resource(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        ) as stream:
            assert "[loggers]" in stream.read()

    def test_load_local_file(self):
        with NamedTemporaryFile("w", suffix=".ini") as config_file:
            config_file.write("[loggers]\n")
            config_file.flush()
            with test_module.load_resource(config_file.name, "utf-8") as stream:
                assert stream.read() == "[loggers]\n"

    def test_load_missing(self):
        assert test_module.load_resource("no/such/file.ini") is None
        assert test_module.load_resource("no_such_package:file.ini") is None
