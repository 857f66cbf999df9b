from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sandwiched.dbo.models import DetectedSandwich, PoolMetadata
from sandwiched.dto.schemas import Pool, Sandwich, Token


# — PoolMetadata —
async def insert_pool_metadata(session: AsyncSession, pool: Pool) -> None:
    obj = PoolMetadata(
        pool_address=pool.address,
        dex_name=pool.dex,
        token0_address=pool.token0.address,
        token0_symbol=pool.token0.symbol,
        token0_decimals=pool.token0.decimals,
        token0_cg_id=pool.token0.cg_id,
        token1_address=pool.token1.address,
        token1_symbol=pool.token1.symbol,
        token1_decimals=pool.token1.decimals,
        token1_cg_id=pool.token1.cg_id,
    )
    session.add(obj)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()  # já existe, ignora


async def get_pool_metadata(session: AsyncSession, pool_address: str) -> Optional[Pool]:
    with session.no_autoflush:
        res = await session.get(PoolMetadata, pool_address)

    if res is None:
        return None

    return Pool(
        address=res.pool_address,
        dex=res.dex_name,
        token0=Token(
            address=res.token0_address,
            symbol=res.token0_symbol,
            decimals=res.token0_decimals,
            cg_id=res.token0_cg_id,
        ),
        token1=Token(
            address=res.token1_address,
            symbol=res.token1_symbol,
            decimals=res.token1_decimals,
            cg_id=res.token1_cg_id,
        ),
    )


# — DetectedSandwich —
async def save_detected_sandwich(session: AsyncSession, sandwich: Sandwich) -> None:
    obj = DetectedSandwich(
        open_hash=sandwich.open.tx,
        target_hash=sandwich.target.tx,
        close_hash=sandwich.close.tx,
        pool=sandwich.pool,
        dex=sandwich.dex,
        mev=sandwich.mev,
        payload=sandwich.model_dump_json(by_alias=True, exclude_none=True),
    )
    session.add(obj)
    try:
        await session.commit()
    except IntegrityError:
        await session.rollback()  # ignora duplicatas


async def fetch_detected_sandwiches_by_target(
    session: AsyncSession, target_hash: str
) -> list[Sandwich]:
    with session.no_autoflush:
        result = await session.execute(
            select(DetectedSandwich)
            .where(DetectedSandwich.target_hash == target_hash)
            .order_by(DetectedSandwich.open_hash)
        )
    return [
        Sandwich.model_validate_json(row.payload) for row in result.scalars().all()
    ]
