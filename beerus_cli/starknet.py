"""StarkNet queries answered through the light client."""

from __future__ import annotations

from typing import Any, Sequence

from .model import CommandResponse, ResponseKind
from .types import parse_block_id, parse_field_element, parse_u256


async def query_starknet_state_root(beerus: Any) -> CommandResponse:
    """Query the StarkNet state root."""
    state_root = await beerus.starknet_state_root()
    return CommandResponse(ResponseKind.STARKNET_QUERY_STATE_ROOT, state_root)


async def query_starknet_get_storage_at(beerus: Any, address: str, slot: str) -> CommandResponse:
    """Query a storage slot of a StarkNet contract."""
    address_felt = parse_field_element(address)
    slot_felt = parse_field_element(slot)
    value = await beerus.starknet_get_storage_at(address_felt, slot_felt)
    return CommandResponse(ResponseKind.STARKNET_QUERY_GET_STORAGE_AT, value)


async def query_starknet_contract_view(
    beerus: Any, address: str, selector: str, calldata: Sequence[str]
) -> CommandResponse:
    """Call a view function of a StarkNet contract."""
    address_felt = parse_field_element(address)
    selector_felt = parse_field_element(selector)
    calldata_felts = [parse_field_element(item) for item in calldata]
    result = await beerus.starknet_call_contract(address_felt, selector_felt, calldata_felts)
    return CommandResponse(ResponseKind.STARKNET_QUERY_CONTRACT, list(result))


async def query_starknet_nonce(beerus: Any, address: str) -> CommandResponse:
    """Query the nonce of a StarkNet contract."""
    addr = parse_field_element(address)
    nonce = await beerus.starknet_get_nonce(addr)
    return CommandResponse(ResponseKind.STARKNET_QUERY_NONCE, nonce)


async def query_starknet_l1_to_l2_messages_cancellation_timestamp(
    beerus: Any, msg_hash: str
) -> CommandResponse:
    """Query when an L1 to L2 message was cancelled; 0 if it was not."""
    hash_value = parse_u256(msg_hash)
    timestamp = await beerus.starknet_l1_to_l2_message_cancellations(hash_value)
    return CommandResponse(ResponseKind.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS, timestamp)


async def query_starknet_l1_to_l2_messages(beerus: Any, msg_hash: str) -> CommandResponse:
    """Query msg_fee + 1 for the L1 to L2 message with the given hash."""
    hash_value = parse_u256(msg_hash)
    fee = await beerus.starknet_l1_to_l2_messages(hash_value)
    return CommandResponse(ResponseKind.STARKNET_L1_TO_L2_MESSAGES, fee)


async def query_starknet_l2_to_l1_messages(beerus: Any, msg_hash: str) -> CommandResponse:
    """Query msg_fee + 1 for the L2 to L1 message with the given hash."""
    hash_value = parse_u256(msg_hash)
    fee = await beerus.starknet_l2_to_l1_messages(hash_value)
    return CommandResponse(ResponseKind.STARKNET_L2_TO_L1_MESSAGES, fee)


async def query_starknet_l1_to_l2_message_nonce(beerus: Any) -> CommandResponse:
    """Query the current nonce of the L1 to L2 message bridge."""
    nonce = await beerus.starknet_l1_to_l2_message_nonce()
    return CommandResponse(ResponseKind.STARKNET_L1_TO_L2_MESSAGE_NONCE, nonce)


async def query_chain_id(beerus: Any) -> CommandResponse:
    """Query the chain id of the StarkNet network."""
    chain_id = await beerus.starknet_lightclient.chain_id()
    return CommandResponse(ResponseKind.STARKNET_QUERY_CHAIN_ID, chain_id)


async def query_block_number(beerus: Any) -> CommandResponse:
    """Query the current block number of the StarkNet network."""
    block_number = await beerus.starknet_lightclient.block_number()
    return CommandResponse(ResponseKind.STARKNET_QUERY_BLOCK_NUMBER, block_number)


async def query_block_hash_and_number(beerus: Any) -> CommandResponse:
    """Query the current block hash and number of the StarkNet network."""
    result = await beerus.starknet_lightclient.block_hash_and_number()
    return CommandResponse(ResponseKind.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER, result)


async def get_class(
    beerus: Any, block_id_type: str, block_id: str, class_hash: str
) -> CommandResponse:
    """Query the contract class with the given hash as of the given block."""
    block = parse_block_id(block_id_type, block_id)
    class_hash_felt = parse_field_element(class_hash)
    contract_class = await beerus.starknet_lightclient.get_class(block, class_hash_felt)
    return CommandResponse(ResponseKind.STARKNET_QUERY_GET_CLASS, contract_class)