from tests.helpers.object_mothers.auth_response_dto_object_mother import AuthResponseDtoObjectMother
from tests.helpers.object_mothers.exchange_api_key_dto_object_mother import ExchangeApiKeyDtoObjectMother
from tests.helpers.object_mothers.holding_dto_object_mother import HoldingDtoObjectMother
from tests.helpers.object_mothers.portfolio_balances_dto_object_mother import PortfolioBalancesDtoObjectMother
from tests.helpers.object_mothers.portfolio_dto_object_mother import PortfolioDtoObjectMother
from tests.helpers.object_mothers.trade_dto_object_mother import TradeDtoObjectMother
from tests.helpers.object_mothers.trading212_dto_object_mother import Trading212DtoObjectMother
from tests.helpers.object_mothers.transfer_dto_object_mother import TransferDtoObjectMother

__all__ = [
    "AuthResponseDtoObjectMother",
    "ExchangeApiKeyDtoObjectMother",
    "HoldingDtoObjectMother",
    "PortfolioBalancesDtoObjectMother",
    "PortfolioDtoObjectMother",
    "TradeDtoObjectMother",
    "Trading212DtoObjectMother",
    "TransferDtoObjectMother",
]
