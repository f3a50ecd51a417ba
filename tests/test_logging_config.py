import logging

from app.logging_config import LoggingConfig, get_logging_config, log_api_access


def _access_lines():
    return get_logging_config().access_log_file.read_text(encoding="utf-8").splitlines()


def test_logging_config_creates_directory(tmp_path):
    config = LoggingConfig(str(tmp_path / "nested" / "logs"))

    assert config.logs_dir.is_dir()
    assert config.app_log_file.name == "health_server.log"
    assert config.error_log_file.name == "health_server_errors.log"
    assert config.access_log_file.name == "health_server_access.log"


def test_setup_logging_does_not_stack_handlers():
    config = get_logging_config()
    config.setup_logging()
    config.setup_logging()

    assert len(logging.getLogger().handlers) == 3
    access_logger = logging.getLogger("access")
    assert len(access_logger.handlers) == 1
    assert access_logger.propagate is False


def test_log_api_access_full_line():
    log_api_access("GET", "/health", 200, 0.0123, "10.0.0.7")

    assert _access_lines()[-1].endswith(
        "| ACCESS | method=GET | path=/health | client=10.0.0.7 | status=200 | response_time=0.012s"
    )


def test_log_api_access_defaults_and_error():
    log_api_access("POST", "/missing", error="boom")

    assert _access_lines()[-1].endswith(
        "| ACCESS | method=POST | path=/missing | client=unknown | status=N/A | error=boom"
    )


def test_errors_reach_error_log():
    logging.getLogger("tests.errors").error("health responder exploded")

    errors = get_logging_config().error_log_file.read_text(encoding="utf-8")
    assert "| tests.errors | ERROR | health responder exploded" in errors
