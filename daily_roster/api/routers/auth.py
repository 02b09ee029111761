import asyncio

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel

from daily_roster.api.dependencies import get_config, get_credentials
from daily_roster.auth.credentials import SCOPES, CredentialContext, Unauthenticated, revoke_access_token
from daily_roster.config import AppConfig


router = APIRouter(prefix="/auth", tags=["authentication"])


class ClientConfig(BaseModel):
    client_id: str
    scope: str


@router.get("/config")
async def client_config(config: AppConfig = Depends(get_config)) -> ClientConfig:
    """Return what the browser token client needs to request an access token."""
    return ClientConfig(client_id=config["GOOGLE_CLIENT_ID"], scope=" ".join(SCOPES))


@router.post("/logout", status_code=204)
async def logout(credentials: CredentialContext = Depends(get_credentials)) -> Response:
    """Revoke the caller's access token.

    A token Google no longer accepts answers 401, same as a missing one.
    """
    token = credentials.require().token
    revoked = await asyncio.to_thread(revoke_access_token, token)
    credentials.clear()
    if not revoked:
        raise Unauthenticated("Access token was already expired or revoked")
    return Response(status_code=204)
