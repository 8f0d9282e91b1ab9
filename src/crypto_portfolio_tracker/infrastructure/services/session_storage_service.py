import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.infrastructure.adapters.dtos.auth_dto import UserDto
from crypto_portfolio_tracker.infrastructure.services.enums import SessionKeysEnum
from crypto_portfolio_tracker.infrastructure.services.vo.user_session import SessionUser, UserSession

logger = logging.getLogger(__name__)


class SessionStorageService:
    """
    Persists the logged user session between runs in a local JSON document.
    """

    def __init__(self, configuration_properties: ConfigurationProperties) -> None:
        self._configuration_properties = configuration_properties

    @property
    def storage_path(self) -> Path:
        return Path(self._configuration_properties.session_storage_path)

    def load(self) -> UserSession | None:
        if not self.storage_path.is_file():
            return None
        try:
            data: dict[str, Any] = json.loads(self.storage_path.read_text(encoding="utf-8") or "{}")
            if not isinstance(data, dict):
                raise ValueError("Persisted session must be a JSON object")
            access_token = data.get(SessionKeysEnum.ACCESS_TOKEN.value)
            raw_user = data.get(SessionKeysEnum.USER.value)
            if not access_token or not raw_user:
                return None
            user = UserDto.model_validate(raw_user)
            ret = UserSession(
                user=SessionUser(id=user.id, email=user.email, name=user.name),
                access_token=access_token,
                refresh_token=data.get(SessionKeysEnum.REFRESH_TOKEN.value),
            )
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Persisted session at {self.storage_path} could not be read, ignoring it: {str(e)}")
            ret = None
        return ret

    def save(self, session: UserSession) -> None:
        data = {
            SessionKeysEnum.USER.value: {
                "id": session.user.id,
                "email": session.user.email,
                "name": session.user.name,
            },
            SessionKeysEnum.ACCESS_TOKEN.value: session.access_token,
            SessionKeysEnum.REFRESH_TOKEN.value: session.refresh_token,
        }
        self.storage_path.parent.mkdir(parents=True, exist_ok=True)
        self.storage_path.write_text(json.dumps(data), encoding="utf-8")

    def clear(self) -> None:
        self.storage_path.unlink(missing_ok=True)
