from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base

from sandwiched.config import AppConfig

engine: AsyncEngine = create_async_engine(
    AppConfig.DATABASE_URL,
    echo=AppConfig.SQLALCHEMY_ECHO,
    future=True,
)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,  # evita expirar objetos após commit
)

Base = declarative_base()


async def init_db() -> None:
    """
    Executa CREATE TABLE IF NOT EXISTS para todos os modelos.
    Chamar em @app.on_event("startup").
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
