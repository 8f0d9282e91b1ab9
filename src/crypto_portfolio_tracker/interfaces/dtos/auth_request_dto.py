from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: str
    password: str = Field(..., min_length=1)


class RegisterRequestDto(LoginRequestDto):
    name: str = Field(..., min_length=1)


class SessionUserDto(BaseModel):
    id: str
    email: str
    name: str | None = None
