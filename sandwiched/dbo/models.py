from sqlalchemy import Boolean, Column, Integer, String

from sandwiched.database import Base


class PoolMetadata(Base):
    __tablename__ = "pool_metadata"

    pool_address = Column(String, primary_key=True)
    dex_name = Column(String, nullable=False)
    token0_address = Column(String)
    token0_symbol = Column(String, nullable=False)
    token0_decimals = Column(Integer, nullable=False)
    token0_cg_id = Column(String, nullable=True)
    token1_address = Column(String)
    token1_symbol = Column(String, nullable=False)
    token1_decimals = Column(Integer, nullable=False)
    token1_cg_id = Column(String, nullable=True)


class DetectedSandwich(Base):
    __tablename__ = "detected_sandwich"

    open_hash = Column(String, primary_key=True)
    target_hash = Column(String, primary_key=True, index=True)
    close_hash = Column(String, primary_key=True)
    pool = Column(String, nullable=False)
    dex = Column(String, nullable=False)
    mev = Column(Boolean, default=False)
    # Sandwich serializado (by_alias)
    payload = Column(String, nullable=False)
