"""Unit tests for access log levels."""

import logging

from skillswap.api.middleware.latency_logging import access_log_level


class TestAccessLogLevel:
    """Tests for access_log_level."""

    def test_health_checks_are_debug(self) -> None:
        assert access_log_level("/health", 200, 5000)[0] == logging.DEBUG

    def test_server_errors(self) -> None:
        assert access_log_level("/api/v1/browse", 500, 10) == (logging.ERROR, "")

    def test_slow_requests(self) -> None:
        assert access_log_level("/api/v1/browse", 200, 1500) == (logging.WARNING, "SLOW REQUEST: ")
        assert access_log_level("/api/v1/browse", 200, 3500) == (logging.ERROR, "VERY SLOW REQUEST: ")

    def test_client_errors_and_success(self) -> None:
        assert access_log_level("/api/v1/dashboard", 404, 10)[0] == logging.WARNING
        assert access_log_level("/api/v1/dashboard", 200, 10)[0] == logging.INFO
