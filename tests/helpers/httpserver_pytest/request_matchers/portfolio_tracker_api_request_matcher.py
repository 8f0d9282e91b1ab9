import logging
from typing import Self

from pytest_httpserver import RequestMatcher, URIPattern
from werkzeug import Request

logger = logging.getLogger(__name__)


class PortfolioTrackerAPIRequestMatcher(RequestMatcher):
    _access_token: str | None = None

    def set_access_token(self, access_token: str) -> Self:
        self._access_token = access_token
        return self

    def difference(self, request: Request) -> list[tuple[str, str, str | URIPattern]]:
        difference = super().difference(request)
        # Authenticated endpoints must carry the bearer token of the session
        if self._access_token is not None:
            expected_authorization = f"Bearer {self._access_token}"
            if (received_authorization := request.headers.get("Authorization")) != expected_authorization:
                difference.append(("Authorization", received_authorization, expected_authorization))
        return difference
