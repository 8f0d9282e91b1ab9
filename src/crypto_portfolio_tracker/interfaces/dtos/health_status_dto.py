from pydantic import BaseModel


class HealthStatusDto(BaseModel):
    status: str = "UP"
