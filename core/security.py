import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from firebase_admin import auth, exceptions

logger = logging.getLogger(__name__)

# tokenUrl is only used for the OpenAPI docs; tokens are issued by Firebase on the client
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/token")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(token: str = Depends(oauth2_scheme)) -> dict:
    """
    Dependency to verify a Firebase ID token and return its decoded payload.
    Used to protect every checklist endpoint.
    """
    try:
        return auth.verify_id_token(token)
    except auth.ExpiredIdTokenError:
        raise _unauthorized("Token has expired")
    except auth.RevokedIdTokenError:
        raise _unauthorized("Token has been revoked")
    except auth.InvalidIdTokenError:
        raise _unauthorized("Invalid token")
    except (ValueError, exceptions.FirebaseError) as e:
        logger.warning(f"Could not verify ID token: {e}")
        raise _unauthorized(f"Could not validate credentials: {e}")
