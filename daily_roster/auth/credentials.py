import logging

import requests
from google.auth.credentials import Credentials
from google.oauth2 import credentials as user_credentials


logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets.readonly"]
REVOKE_URL = "https://oauth2.googleapis.com/revoke"


class Unauthenticated(Exception):
    """Raised when a sheet read is attempted without a credential"""


class RevokeError(Exception):
    """Google could not be reached to revoke a token"""


class CredentialContext:
    """Holds the credential used for sheet reads

    The context is passed explicitly to the reader; a request handler builds one
    from the caller's bearer token and drops it when the request is done.
    """

    def __init__(self, credentials: Credentials | None = None) -> None:
        self._credentials = credentials

    @classmethod
    def from_access_token(cls, access_token: str | None) -> "CredentialContext":
        """Wrap an OAuth access token obtained by the browser token client"""
        if not access_token:
            return cls()
        return cls(user_credentials.Credentials(token=access_token, scopes=SCOPES))

    def get_credential(self) -> Credentials | None:
        return self._credentials

    def require(self) -> Credentials:
        """Return the credential or fail fast if none is present"""
        if self._credentials is None:
            raise Unauthenticated("No access token, please log in first")
        return self._credentials

    def clear(self) -> None:
        self._credentials = None


def revoke_access_token(access_token: str, timeout: float = 10) -> bool:
    """Revoke an access token at Google so it can no longer be used

    Returns False when Google rejects the token (already revoked or expired).
    """
    try:
        response = requests.post(
            REVOKE_URL,
            params={"token": access_token},
            headers={"content-type": "application/x-www-form-urlencoded"},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Token revocation failed: {e}")
        raise RevokeError(f"Could not revoke access token: {e!s}") from e
    if response.status_code != requests.codes.ok:
        logger.warning(f"Token revocation returned {response.status_code}: {response.text}")
        return False
    logger.info("access token revoked")
    return True
