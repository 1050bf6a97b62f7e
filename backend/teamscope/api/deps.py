from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from teamscope.core.config import settings
from teamscope.core.security import decode_access_token
from teamscope.db.mongodb import get_database
from teamscope.models.user import User
from teamscope.repositories import UserRepository
from teamscope.services.access import MongoMembershipStore, TeamAccessService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/login/access-token")


async def get_current_user(
    db: AsyncIOMotorDatabase = Depends(get_database),
    token: str = Depends(oauth2_scheme),
) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    username = decode_access_token(token)
    if username is None:
        raise credentials_exception

    user = await UserRepository(db).get_by_username(username)
    if user is None:
        raise credentials_exception
    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user),
) -> User:
    if not current_user.enabled:
        raise HTTPException(status_code=400, detail="Inactive user")
    return current_user


async def get_access_service(
    db: AsyncIOMotorDatabase = Depends(get_database),
) -> TeamAccessService:
    return TeamAccessService(MongoMembershipStore(db))
