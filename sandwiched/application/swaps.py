from typing import Optional

from eth_abi import decode
from eth_utils import event_abi_to_log_topic
from web3 import AsyncWeb3, Web3

from sandwiched.dto.schemas import SwapLog

UNISWAP_V2_SWAP_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "name": "sender", "type": "address"},
        {"indexed": False, "name": "amount0In", "type": "uint256"},
        {"indexed": False, "name": "amount1In", "type": "uint256"},
        {"indexed": False, "name": "amount0Out", "type": "uint256"},
        {"indexed": False, "name": "amount1Out", "type": "uint256"},
        {"indexed": True, "name": "to", "type": "address"},
    ],
    "name": "Swap",
    "type": "event",
}

SWAP_V2_TOPIC = event_abi_to_log_topic(UNISWAP_V2_SWAP_ABI)

ERC20_TRANSFER_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True, "name": "from", "type": "address"},
        {"indexed": True, "name": "to", "type": "address"},
        {"indexed": False, "name": "value", "type": "uint256"},
    ],
    "name": "Transfer",
    "type": "event",
}

TRANSFER_TOPIC = event_abi_to_log_topic(ERC20_TRANSFER_ABI)


def _address_topic(address: Optional[str]) -> Optional[str]:
    if address is None:
        return None
    return "0x" + "0" * 24 + Web3.to_checksum_address(address)[2:].lower()


def _topic_address(topic) -> str:
    return Web3.to_checksum_address(bytes(topic)[-20:])


def is_swap_log(log) -> bool:
    topics = log["topics"]
    return len(topics) == 3 and bytes(topics[0]) == SWAP_V2_TOPIC


def swap_log_from_raw(log) -> SwapLog:
    a0in, a1in, a0out, a1out = decode(
        ["uint256", "uint256", "uint256", "uint256"], bytes(log["data"])
    )
    return SwapLog.from_amounts(
        a0in,
        a1in,
        a0out,
        a1out,
        transaction_hash=Web3.to_hex(log["transactionHash"]),
        block_number=log["blockNumber"],
        transaction_index=log["transactionIndex"],
        log_index=log["logIndex"],
        address=Web3.to_checksum_address(log["address"]),
        sender=_topic_address(log["topics"][1]),
        to=_topic_address(log["topics"][2]),
    )


def _sort_key(swap: SwapLog):
    return (swap.block_number, swap.transaction_index, swap.log_index)


async def get_swaps(
    async_web3: AsyncWeb3,
    pool_address: Optional[str],
    sender: Optional[str],
    to: Optional[str],
    from_block: int,
    to_block: int,
) -> list[SwapLog]:
    """
    Busca os eventos Swap (Uniswap V2 e forks) no intervalo de blocos,
    filtrando opcionalmente por pool, sender e destinatário.

    O retorno é ordenado por bloco, índice da transação e índice do log.
    """
    log_filter = {
        "fromBlock": from_block,
        "toBlock": to_block,
        "topics": [
            Web3.to_hex(SWAP_V2_TOPIC),
            _address_topic(sender),
            _address_topic(to),
        ],
    }
    if pool_address is not None:
        log_filter["address"] = Web3.to_checksum_address(pool_address)

    logs = await async_web3.eth.get_logs(log_filter)
    swaps = [swap_log_from_raw(log) for log in logs if is_swap_log(log)]
    return sorted(swaps, key=_sort_key)


def swaps_from_receipt(receipt) -> list[SwapLog]:
    swaps = [swap_log_from_raw(log) for log in receipt["logs"] if is_swap_log(log)]
    return sorted(swaps, key=_sort_key)


async def get_transfer_tx_hashes(
    async_web3: AsyncWeb3, sender: str, from_block: int, to_block: int
) -> list[str]:
    """
    Hashes das transações em que `sender` enviou algum token ERC-20.

    Pega trades multi-hop, cujo Swap do primeiro pool tem como `to` o
    próximo par e não o endereço buscado.
    """
    log_filter = {
        "fromBlock": from_block,
        "toBlock": to_block,
        "topics": [Web3.to_hex(TRANSFER_TOPIC), _address_topic(sender)],
    }
    logs = await async_web3.eth.get_logs(log_filter)

    hashes = []
    for log in logs:
        tx_hash = Web3.to_hex(log["transactionHash"])
        if tx_hash not in hashes:
            hashes.append(tx_hash)
    return hashes
