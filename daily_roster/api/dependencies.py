from functools import lru_cache

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..auth.credentials import CredentialContext
from ..config import AppConfig, load_config
from ..schedule.resolver import RosterResolver
from ..sheets.client import SheetReader


bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_config() -> AppConfig:
    return load_config()


def get_credentials(
    authorization: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CredentialContext:
    """Build the credential context from the caller's Google access token"""
    if authorization is None or authorization.scheme.lower() != "bearer":
        return CredentialContext()
    return CredentialContext.from_access_token(authorization.credentials)


def get_resolver(
    config: AppConfig = Depends(get_config),
    credentials: CredentialContext = Depends(get_credentials),
) -> RosterResolver:
    reader = SheetReader(spreadsheet_id=config["SPREADSHEET_ID"], credentials=credentials)
    return RosterResolver(reader, epoch=config["ROSTER_EPOCH"])
