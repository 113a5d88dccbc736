import logging
from typing import Optional

from fastapi import Request, HTTPException

from infrastructure.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


class AuthService:
    @staticmethod
    async def get_user_from_token(request: Request, required=False) -> Optional[str]:
        auth_header = request.headers.get('Authorization')
        if not auth_header or not auth_header.startswith('Bearer '):
            if required:
                raise HTTPException(status_code=401, detail="Authorization header is required")
            return None

        try:
            # Extraer el token
            token = auth_header.split(' ', 1)[1]
            user = SupabaseClient.get_user(token)
            if not user or not hasattr(user.user, 'id'):
                if required:
                    raise HTTPException(status_code=401, detail="Invalid token or user not found")
                return None

            return user.user.id
        except HTTPException:
            raise
        except Exception as e:
            if required:
                raise HTTPException(status_code=401, detail="Authentication error")
            logger.warning(f"Could not resolve user from token: {e}")
            return None
