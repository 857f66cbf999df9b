from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from sqlalchemy.ext.asyncio import AsyncSession
from typing import AsyncGenerator

from sandwiched.application.blocks import BlockService
from sandwiched.application.chain_client import ChainClient
from sandwiched.application.pools import PoolService
from sandwiched.application.web3_client.main import async_web3
from sandwiched.config import AppConfig
from sandwiched.database import engine, init_db, AsyncSessionLocal

import logging

logging.getLogger("urllib3").setLevel(logging.CRITICAL)


origins = ["*"]

app = FastAPI(
    docs_url="/docs",
    title="Sandwiched ***" + AppConfig.ENV + "***",
    summary="API para detecção de ataques sanduíche em pools Uniswap V2",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

chain_client = ChainClient(
    async_web3,
    pools=PoolService(async_web3, session_factory=AsyncSessionLocal),
    blocks=BlockService(async_web3),
)


@app.on_event("startup")
async def startup_event():
    await init_db()


@app.on_event("shutdown")
async def shutdown():
    await engine.dispose()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session


def get_chain_client() -> ChainClient:
    return chain_client
