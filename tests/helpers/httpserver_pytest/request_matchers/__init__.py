from tests.helpers.httpserver_pytest.request_matchers.portfolio_tracker_api_request_matcher import (
    PortfolioTrackerAPIRequestMatcher,
)

__all__ = ["PortfolioTrackerAPIRequestMatcher"]
