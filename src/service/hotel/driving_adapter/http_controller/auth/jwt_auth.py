"""
Bearer token signing and verification
"""

from datetime import datetime, timezone
from typing import Dict

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM

    def create_jwt_token(self, *, user_id: int) -> str:
        # No `exp` claim: a session ends when its row is deleted
        payload = {
            'user_id': user_id,
            'iat': datetime.now(timezone.utc),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    def get_user_id_from_jwt(self, token: str) -> int:
        payload = self.decode_jwt_token(token)
        user_id = payload.get('user_id')

        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise AuthenticationError('Invalid token')

        return user_id
