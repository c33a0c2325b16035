"""Database Setup."""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from apps.market.setup.config import get_settings

settings = get_settings()

# SQLAlchemy Engine (연결은 첫 사용 시 생성)
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_size=settings.database_pool_size,
    max_overflow=settings.database_max_overflow,
    pool_pre_ping=True,
)

# Session Factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """요청 단위 DB 세션을 주입합니다.

    커밋은 유스케이스가 TransactionManager 로 수행하고,
    커밋되지 않은 변경은 세션 종료 시 롤백됩니다.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """커넥션 풀을 닫습니다."""
    await engine.dispose()
