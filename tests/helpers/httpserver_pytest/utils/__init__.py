from tests.helpers.httpserver_pytest.utils.portfolio_tracker_mocks import (
    prepare_httpserver_auth_mock,
    prepare_httpserver_authenticated_mock,
    prepare_httpserver_error_mock,
    to_json,
)

__all__ = [
    "prepare_httpserver_auth_mock",
    "prepare_httpserver_authenticated_mock",
    "prepare_httpserver_error_mock",
    "to_json",
]
