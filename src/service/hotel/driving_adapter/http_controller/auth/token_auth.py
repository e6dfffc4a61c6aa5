from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.hotel.app.interface.i_session_query_repo import ISessionQueryRepo
from src.service.hotel.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    session_query_repo: ISessionQueryRepo = Depends(Provide[Container.session_query_repo]),
) -> int:
    """
    Resolve the authenticated user id from `Authorization: Bearer <token>`.

    The token must carry a valid signature and a `user_id` claim, and a live
    session row must still hold it.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    token = credentials.credentials
    user_id = jwt_auth.get_user_id_from_jwt(token)

    session = await session_query_repo.get_by_token(token=token)
    if session is None:
        raise AuthenticationError('Session not found')

    return user_id
