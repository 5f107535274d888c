# =============================================================================
# Auth API Routes
# =============================================================================
#
# Endpoints:
#   POST /api/login  - Exchange username + password for a bearer token
#
# =============================================================================

from fastapi import APIRouter, Depends

from bloglist.auth.credentials import CredentialStore
from bloglist.auth.jwt import TokenService
from bloglist.auth.policies import get_credential_store, get_token_service
from bloglist.core.models import LoginRequest, LoginResponse

router = APIRouter(prefix="/api/login", tags=["auth"])


@router.post("", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    credentials: CredentialStore = Depends(get_credential_store),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Authenticate and get a token.

    401 with a uniform message on unknown user or wrong password.
    """
    account = await credentials.verify(data.username, data.password)

    return LoginResponse(
        token=tokens.issue(account),
        username=account.username,
        name=account.name,
    )
