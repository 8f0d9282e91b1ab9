from tests.helpers.httpserver_pytest.request_matchers import PortfolioTrackerAPIRequestMatcher

__all__ = ["PortfolioTrackerAPIRequestMatcher"]
