from pydantic import BaseModel, ConfigDict, Field


class UserDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    email: str
    name: str | None = None
    created_at: str | None = Field(alias="createdAt", default=None)
    updated_at: str | None = Field(alias="updatedAt", default=None)


class AuthResponseDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user: UserDto
    access_token: str = Field(..., alias="accessToken")
    refresh_token: str | None = Field(alias="refreshToken", default=None)


class LoginCredentialsDto(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    email: str
    password: str


class RegisterCredentialsDto(LoginCredentialsDto):
    name: str
