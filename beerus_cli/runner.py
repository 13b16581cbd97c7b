"""Dispatch a parsed command line to the query that answers it."""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping

from . import ethereum, starknet
from .model import Cli, Command, CommandResponse

_Handler = Callable[[Any, Mapping[str, Any]], Awaitable[CommandResponse]]

_HANDLERS: dict[Command, _Handler] = {
    Command.ETHEREUM_QUERY_BALANCE: lambda beerus, args: ethereum.query_balance(
        beerus, args["address"]
    ),
    Command.ETHEREUM_QUERY_NONCE: lambda beerus, args: ethereum.query_nonce(
        beerus, args["address"]
    ),
    Command.ETHEREUM_QUERY_BLOCK_NUMBER: lambda beerus, args: ethereum.query_block_number(beerus),
    Command.ETHEREUM_QUERY_CHAIN_ID: lambda beerus, args: ethereum.query_chain_id(beerus),
    Command.ETHEREUM_QUERY_CODE: lambda beerus, args: ethereum.query_code(
        beerus, args["address"]
    ),
    Command.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER: (
        lambda beerus, args: ethereum.query_block_transaction_count_by_number(
            beerus, args["block"]
        )
    ),
    Command.ETHEREUM_QUERY_TX_BY_HASH: lambda beerus, args: ethereum.query_transaction_by_hash(
        beerus, args["hash"]
    ),
    Command.ETHEREUM_QUERY_GAS_PRICE: lambda beerus, args: ethereum.query_gas_price(beerus),
    Command.ETHEREUM_QUERY_ESTIMATE_GAS: lambda beerus, args: ethereum.query_estimate_gas(
        beerus, args["params"]
    ),
    Command.STARKNET_QUERY_STATE_ROOT: lambda beerus, args: starknet.query_starknet_state_root(
        beerus
    ),
    Command.STARKNET_QUERY_CONTRACT: lambda beerus, args: starknet.query_starknet_contract_view(
        beerus, args["address"], args["selector"], list(args.get("calldata") or [])
    ),
    Command.STARKNET_QUERY_GET_STORAGE_AT: (
        lambda beerus, args: starknet.query_starknet_get_storage_at(
            beerus, args["address"], args["key"]
        )
    ),
    Command.STARKNET_QUERY_NONCE: lambda beerus, args: starknet.query_starknet_nonce(
        beerus, args["address"]
    ),
    Command.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS: (
        lambda beerus, args: starknet.query_starknet_l1_to_l2_messages_cancellation_timestamp(
            beerus, args["msg_hash"]
        )
    ),
    Command.STARKNET_L1_TO_L2_MESSAGES: (
        lambda beerus, args: starknet.query_starknet_l1_to_l2_messages(beerus, args["msg_hash"])
    ),
    Command.STARKNET_L2_TO_L1_MESSAGES: (
        lambda beerus, args: starknet.query_starknet_l2_to_l1_messages(beerus, args["msg_hash"])
    ),
    Command.STARKNET_L1_TO_L2_MESSAGE_NONCE: (
        lambda beerus, args: starknet.query_starknet_l1_to_l2_message_nonce(beerus)
    ),
    Command.STARKNET_QUERY_CHAIN_ID: lambda beerus, args: starknet.query_chain_id(beerus),
    Command.STARKNET_QUERY_BLOCK_NUMBER: lambda beerus, args: starknet.query_block_number(beerus),
    Command.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER: (
        lambda beerus, args: starknet.query_block_hash_and_number(beerus)
    ),
    Command.STARKNET_QUERY_GET_CLASS: lambda beerus, args: starknet.get_class(
        beerus, args["block_id_type"], args["block_id"], args["class_hash"]
    ),
}


async def run(beerus: Any, cli: Cli) -> CommandResponse:
    """Run the command of ``cli`` against the light client and return its response.

    Errors from argument parsing or from the light client propagate unchanged.
    """
    try:
        handler = _HANDLERS[cli.command]
    except KeyError:
        raise ValueError(f"unsupported command: {cli.command}") from None
    return await handler(beerus, cli.arguments)