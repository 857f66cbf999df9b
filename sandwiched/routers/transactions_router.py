from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from web3.exceptions import TransactionNotFound

from sandwiched.application.sandwiches_application import (
    fetch_sandwiches_by_transaction_application,
    fetch_stored_sandwiches_application,
)
from sandwiched.config import AppConfig
from sandwiched.dto.schemas import Sandwich
from sandwiched.extension import get_chain_client, get_db

router = APIRouter(
    prefix="/transactions",
    tags=["Transactions"],
    dependencies=[],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/{transaction_hash}/sandwiches",
    summary="Search for sandwiches around the swaps of a transaction.",
    response_model=List[Sandwich],
    response_model_exclude_none=True,
)
async def fetch_sandwiches_by_transaction(
    transaction_hash: str,
    window: int = Query(AppConfig.DEFAULT_WINDOW, ge=0),
    chain_client=Depends(get_chain_client),
    session: AsyncSession = Depends(get_db),
):
    try:
        return await fetch_sandwiches_by_transaction_application(
            chain_client=chain_client,
            transaction_hash=transaction_hash,
            window=window,
            session=session,
        )
    except TransactionNotFound:
        raise HTTPException(
            status_code=404, detail=f"Transaction {transaction_hash} not found"
        )


@router.get(
    "/{transaction_hash}/sandwiches/stored",
    summary="Fetch the sandwiches already found for a transaction.",
    response_model=List[Sandwich],
    response_model_exclude_none=True,
)
async def fetch_stored_sandwiches(
    transaction_hash: str,
    session: AsyncSession = Depends(get_db),
):
    return await fetch_stored_sandwiches_application(
        session=session, transaction_hash=transaction_hash
    )
