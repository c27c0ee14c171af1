from functools import lru_cache

from sqlalchemy.orm import declarative_base
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker

from app.core.config import get_settings

Base = declarative_base()

@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return create_async_engine(settings.database_url, echo=settings.sql_echo)

@lru_cache()
def get_sessionmaker() -> async_sessionmaker:
    return async_sessionmaker(bind=get_engine(), expire_on_commit=False)
