from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from web3 import Web3

from sandwiched.app_exceptions.bad_request_error import (
    BadRequestException,
    InvalidAddressException,
)
from sandwiched.application.sandwiches_application import (
    fetch_sandwiches_by_address_application,
)
from sandwiched.config import AppConfig
from sandwiched.dto.schemas import Sandwich
from sandwiched.extension import get_chain_client, get_db

router = APIRouter(
    prefix="/sandwiches",
    tags=["Sandwiches"],
    dependencies=[],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/{address}",
    summary="Search for sandwiches around the swaps received by an address.",
    response_model=List[Sandwich],
    response_model_exclude_none=True,
)
async def fetch_sandwiches_by_address(
    address: str,
    from_block: int = Query(alias="fromBlock", ge=0),
    to_block: Optional[int] = Query(None, alias="toBlock", ge=0),
    window: int = Query(AppConfig.DEFAULT_WINDOW, ge=0),
    chain_client=Depends(get_chain_client),
    session: AsyncSession = Depends(get_db),
):
    if not Web3.is_address(address):
        raise InvalidAddressException(address)

    if to_block is None:
        to_block = from_block + 1
    if from_block > to_block:
        raise BadRequestException(
            f"fromBlock ({from_block}) must not be greater than toBlock ({to_block})"
        )

    return await fetch_sandwiches_by_address_application(
        chain_client=chain_client,
        address=Web3.to_checksum_address(address),
        from_block=from_block,
        to_block=to_block,
        window=window,
        session=session,
    )
