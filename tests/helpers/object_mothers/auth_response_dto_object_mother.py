from faker import Faker

from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import AuthResponseDto, UserDto


class AuthResponseDtoObjectMother:
    _faker: Faker = Faker()

    @classmethod
    def create(cls, *, email: str | None = None) -> AuthResponseDto:
        return AuthResponseDto(
            user=UserDto(id=cls._faker.uuid4(), email=email or cls._faker.email(), name=cls._faker.name()),
            access_token=cls._faker.sha256(),
            refresh_token=cls._faker.sha256(),
        )
