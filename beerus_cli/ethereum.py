"""Ethereum queries answered through the light client."""

from __future__ import annotations

from typing import Any

from .model import CommandResponse, ResponseKind
from .types import (
    U256_MAX,
    BlockTag,
    CallOpts,
    TransactionObject,
    format_ether,
    parse_address,
    parse_h256,
)

_DEC_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _dec_u256_or_none(text: str) -> int | None:
    """Read a decimal 256-bit integer; ``None`` if the text is not one."""
    if not set(text) <= _DEC_DIGITS:
        return None
    value = int(text) if text else 0
    return value if value <= U256_MAX else None


def _address_or_none(text: str) -> bytes | None:
    try:
        return parse_address(text)
    except ValueError:
        return None


def _hex_bytes_or_none(text: str) -> bytes | None:
    digits = text[2:] if text.startswith("0x") else text
    if len(digits) % 2 or not set(digits) <= _HEX_DIGITS:
        return None
    return bytes.fromhex(digits)


async def query_balance(beerus: Any, address: str) -> CommandResponse:
    """Query the balance of an address at the latest block, in ether."""
    addr = parse_address(address)
    balance = await beerus.ethereum_lightclient.get_balance(addr, BlockTag())
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_BALANCE, format_ether(balance))


async def query_nonce(beerus: Any, address: str) -> CommandResponse:
    """Query the nonce of an address at the latest block."""
    addr = parse_address(address)
    nonce = await beerus.ethereum_lightclient.get_nonce(addr, BlockTag())
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_NONCE, nonce)


async def query_block_number(beerus: Any) -> CommandResponse:
    """Query the number of the latest block."""
    block_number = await beerus.ethereum_lightclient.get_block_number()
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_BLOCK_NUMBER, block_number)


async def query_chain_id(beerus: Any) -> CommandResponse:
    """Query the chain id of the Ethereum network."""
    chain_id = await beerus.ethereum_lightclient.chain_id()
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_CHAIN_ID, chain_id)


async def query_code(beerus: Any, address: str) -> CommandResponse:
    """Query the code of a contract at the latest block."""
    addr = parse_address(address)
    code = await beerus.ethereum_lightclient.get_code(addr, BlockTag())
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_CODE, code)


async def query_block_transaction_count_by_number(beerus: Any, block: int) -> CommandResponse:
    """Query how many transactions the block with the given number holds."""
    tx_count = await beerus.ethereum_lightclient.get_block_transaction_count_by_number(
        BlockTag(block)
    )
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER, tx_count)


async def query_transaction_by_hash(beerus: Any, tx_hash: str) -> CommandResponse:
    """Query the data of the transaction with the given hash."""
    hash_bytes = parse_h256(tx_hash)
    transaction = await beerus.ethereum_lightclient.get_transaction_by_hash(hash_bytes)
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_TX_BY_HASH, repr(transaction))


async def query_gas_price(beerus: Any) -> CommandResponse:
    """Query the current gas price."""
    gas_price = await beerus.ethereum_lightclient.get_gas_price()
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_GAS_PRICE, gas_price)


async def query_estimate_gas(beerus: Any, params: str) -> CommandResponse:
    """Estimate the gas a transaction, given as a JSON object, needs to complete.

    Only ``to`` must be valid; optional fields that do not parse are left out.
    """
    transaction = TransactionObject.from_json(params)
    call_opts = CallOpts(
        to=parse_address(transaction.to),
        from_=None if transaction.from_ is None else _address_or_none(transaction.from_),
        gas=None if transaction.gas is None else _dec_u256_or_none(transaction.gas),
        gas_price=(
            None if transaction.gas_price is None else _dec_u256_or_none(transaction.gas_price)
        ),
        value=None if transaction.value is None else _dec_u256_or_none(transaction.value),
        data=None if transaction.data is None else _hex_bytes_or_none(transaction.data),
    )
    gas = await beerus.ethereum_lightclient.estimate_gas(call_opts)
    return CommandResponse(ResponseKind.ETHEREUM_QUERY_ESTIMATE_GAS, gas)