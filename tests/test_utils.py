import logging
from unittest import mock

from aaset.settings import AASetSettings, use_settings
from aaset.utils import change_log_level, setup_logging


def test_change_log_level():
    logger = logging.getLogger("aaset.test_change_log_level")
    logger.setLevel(logging.INFO)

    with change_log_level(logger, "debug"):
        assert logger.level == logging.DEBUG
    assert logger.level == logging.INFO

    with change_log_level("aaset.test_change_log_level", logging.ERROR):
        assert logger.level == logging.ERROR
    assert logger.level == logging.INFO


@mock.patch("aaset.utils.logging.basicConfig")
def test_setup_logging(basic_config_mock):
    setup_logging("debug")

    basic_config_mock.assert_called_once()
    assert basic_config_mock.call_args.kwargs["level"] == "DEBUG"
    assert "%(name)s" in basic_config_mock.call_args.kwargs["format"]


@mock.patch("aaset.utils.logging.basicConfig")
def test_setup_logging_uses_settings(basic_config_mock):
    with use_settings(AASetSettings(log_level="warning")):
        setup_logging()

    assert basic_config_mock.call_args.kwargs["level"] == "WARNING"
