from enum import Enum


class SessionKeysEnum(str, Enum):
    """
    Keys of the persisted session document.
    """

    USER = "user"
    ACCESS_TOKEN = "accessToken"
    REFRESH_TOKEN = "refreshToken"
