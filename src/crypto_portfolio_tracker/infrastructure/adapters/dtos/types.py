from typing import Annotated

from pydantic import BeforeValidator

from crypto_portfolio_tracker.commons.utils import to_optional_float

# Backend numeric payloads come as numbers, or strings for SQL decimal columns.
# Anything unusable is parsed as None so a single bad field never fails the whole payload
NumericValue = Annotated[float | None, BeforeValidator(to_optional_float)]
