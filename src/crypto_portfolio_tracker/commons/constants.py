DEFAULT_API_BASE_URL = "http://localhost:3000/api"
DEFAULT_SESSION_STORAGE_PATH = "./.portfolio_tracker_session.json"

DEFAULT_CURRENCY_SYMBOL = "$"
EURO_CURRENCY_SYMBOL = "€"

DEFAULT_POLLING_INTERVAL_SECONDS = 30  # 30 seconds
DEFAULT_HTTP_TIMEOUT_SECONDS = 10
# Number of trades shown in a tracked portfolio view
RECENT_TRADES_LIMIT = 20
TRADING212_TRANSACTIONS_PAGE_SIZE = 50

PERCENTAGE_DECIMAL_PLACES = 2
AMOUNT_DECIMAL_PLACES = 2
ERROR_MESSAGE_MAX_LENGTH = 500
