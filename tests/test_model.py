from pathlib import Path

import pytest

from beerus_cli.model import (
    Cli,
    Command,
    CommandResponse,
    Network,
    ResponseKind,
    build_parser,
    parse_args,
)
from beerus_cli.types import BlockHashAndNumber, ContractClass


def test_display_ethereum_query_balance():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_BALANCE, "1")
    assert str(response) == "1 ETH"


def test_display_ethereum_query_chain_id():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_CHAIN_ID, 1)
    assert str(response) == "1"


def test_display_starknet_query_state_root():
    response = CommandResponse(ResponseKind.STARKNET_QUERY_STATE_ROOT, 1)
    assert str(response) == "1"


def test_display_starknet_query_contract():
    response = CommandResponse(ResponseKind.STARKNET_QUERY_CONTRACT, [123, 456])
    assert str(response) == "[123, 456]"


def test_display_starknet_query_get_storage_at():
    response = CommandResponse(ResponseKind.STARKNET_QUERY_GET_STORAGE_AT, 123)
    assert str(response) == "123"


def test_display_starknet_query_chain_id():
    response = CommandResponse(ResponseKind.STARKNET_QUERY_CHAIN_ID, 123)
    assert str(response) == "Chain id: 123"


def test_display_starknet_query_block_number():
    response = CommandResponse(ResponseKind.STARKNET_QUERY_BLOCK_NUMBER, 123456)
    assert str(response) == "Block number: 123456"


def test_display_starknet_query_block_hash_and_number():
    value = BlockHashAndNumber(block_hash=123456, block_number=123456)
    response = CommandResponse(ResponseKind.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER, value)
    assert str(response) == "Block hash: 123456, Block number: 123456"


def test_display_starknet_query_l1_to_l2_message_nonce():
    response = CommandResponse(ResponseKind.STARKNET_L1_TO_L2_MESSAGE_NONCE, 123)
    assert str(response) == "L1 to L2 Message Nonce: 123"


def test_display_ethereum_query_nonce():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_NONCE, 123)
    assert str(response) == "Nonce: 123"


def test_display_ethereum_query_code():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_CODE, [0, 0, 0, 1])
    assert str(response) == "[0, 0, 0, 1]"


def test_display_ethereum_query_code_empty():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_CODE, b"")
    assert str(response) == "[]"


@pytest.mark.parametrize(
    "kind",
    [
        ResponseKind.ETHEREUM_QUERY_BLOCK_NUMBER,
        ResponseKind.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER,
        ResponseKind.ETHEREUM_QUERY_GAS_PRICE,
        ResponseKind.ETHEREUM_QUERY_ESTIMATE_GAS,
        ResponseKind.STARKNET_QUERY_NONCE,
        ResponseKind.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS,
        ResponseKind.STARKNET_L1_TO_L2_MESSAGES,
        ResponseKind.STARKNET_L2_TO_L1_MESSAGES,
    ],
)
def test_display_plain_numbers(kind):
    assert str(CommandResponse(kind, 1234)) == "1234"


def test_display_transaction_data_is_quoted():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_TX_BY_HASH, 'Some(Transaction { x: "a" })')
    assert str(response) == 'Transaction Data: "Some(Transaction { x: \\"a\\" })"'


def test_display_transaction_data_escapes_control_characters():
    response = CommandResponse(ResponseKind.ETHEREUM_QUERY_TX_BY_HASH, "a\nb\x07")
    assert str(response) == 'Transaction Data: "a\\nb\\u{7}"'


def test_display_contract_class():
    value = ContractClass(
        program=b"\x01\x02\x03",
        entry_points_by_type={"EXTERNAL": [], "CONSTRUCTOR": [], "L1_HANDLER": []},
        abi=[{"inputs": [{"type": "felt", "name": "amount"}]}],
    )
    response = CommandResponse(ResponseKind.STARKNET_QUERY_GET_CLASS, value)
    assert str(response) == (
        '{"abi":[{"inputs":[{"name":"amount","type":"felt"}]}],'
        '"entry_points_by_type":{"CONSTRUCTOR":[],"EXTERNAL":[],"L1_HANDLER":[]},'
        '"program":"AQID"}'
    )


def test_display_contract_class_without_abi_fails():
    value = ContractClass(program=b"", entry_points_by_type={}, abi=None)
    with pytest.raises(ValueError):
        str(CommandResponse(ResponseKind.STARKNET_QUERY_GET_CLASS, value))


def test_parsed_command_network_and_name():
    cli = parse_args(["starknet", "l1-to-l2-message-cancellations", "--msg-hash", "0x1"])
    assert cli.command is Command.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS
    assert cli.command.network is Network.STARKNET
    assert cli.command.cli_name == "l1-to-l2-message-cancellations"
    assert cli.arguments == {"msg_hash": "0x1"}


def test_parse_query_balance():
    cli = parse_args(["ethereum", "query-balance", "-a", "0xc24215226336d22238a20a72f8e489c005b44c4a"])
    assert cli == Cli(
        command=Command.ETHEREUM_QUERY_BALANCE,
        arguments={"address": "0xc24215226336d22238a20a72f8e489c005b44c4a"},
        config=None,
    )


def test_parse_command_without_arguments():
    cli = parse_args(["starknet", "query-state-root"])
    assert cli.command is Command.STARKNET_QUERY_STATE_ROOT
    assert cli.arguments == {}


def test_parse_same_name_on_both_networks():
    assert parse_args(["ethereum", "query-chain-id"]).command is Command.ETHEREUM_QUERY_CHAIN_ID
    assert parse_args(["starknet", "query-chain-id"]).command is Command.STARKNET_QUERY_CHAIN_ID


def test_parse_block_is_integer():
    cli = parse_args(["ethereum", "query-block-tx-count-by-number", "--block", "120"])
    assert cli.arguments == {"block": 120}


@pytest.mark.parametrize("block", ["abc", "-1", str(2**64)])
def test_parse_block_rejects_invalid(block):
    with pytest.raises(SystemExit):
        parse_args(["ethereum", "query-block-tx-count-by-number", "-b", block])


def test_parse_contract_calldata_is_split():
    cli = parse_args(
        ["starknet", "query-contract", "-a", "0x1", "-s", "0x2", "--calldata", "1,2", "--calldata", "3"]
    )
    assert cli.arguments == {"address": "0x1", "selector": "0x2", "calldata": ["1", "2", "3"]}


def test_parse_contract_calldata_defaults_to_empty():
    cli = parse_args(["starknet", "query-contract", "-a", "0x1", "-s", "0x2"])
    assert cli.arguments["calldata"] == []


def test_parse_get_class():
    cli = parse_args(
        [
            "starknet",
            "query-get-class",
            "--block-id-type",
            "number",
            "--block-id",
            "123",
            "--class-hash",
            "0x123",
        ]
    )
    assert cli.command is Command.STARKNET_QUERY_GET_CLASS
    assert cli.arguments == {"block_id_type": "number", "block_id": "123", "class_hash": "0x123"}


def test_parse_message_hash():
    cli = parse_args(["starknet", "l2-to-l1-messages", "--msg-hash", "0"])
    assert cli.arguments == {"msg_hash": "0"}


def test_parse_config_before_command():
    cli = parse_args(["-c", "beerus.toml", "starknet", "query-block-number"])
    assert cli.config == Path("beerus.toml")


def test_parse_config_after_command():
    cli = parse_args(["ethereum", "query-gas-price", "--config", "beerus.toml"])
    assert cli.config == Path("beerus.toml")


def test_parse_missing_required_argument():
    with pytest.raises(SystemExit):
        parse_args(["ethereum", "query-balance"])


def test_parse_missing_command():
    with pytest.raises(SystemExit):
        parse_args([])


def test_parse_unknown_command():
    with pytest.raises(SystemExit):
        parse_args(["ethereum", "query-everything"])


@pytest.mark.parametrize("network", list(Network))
def test_build_parser_lists_every_command_of_a_network(network, capsys):
    parser = build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([network.value, "--help"])
    assert excinfo.value.code == 0
    output = capsys.readouterr().out
    for command in Command:
        if command.network is network:
            assert command.cli_name in output


@pytest.mark.parametrize(
    "command",
    [
        Command.ETHEREUM_QUERY_BLOCK_NUMBER,
        Command.ETHEREUM_QUERY_CHAIN_ID,
        Command.ETHEREUM_QUERY_GAS_PRICE,
        Command.STARKNET_QUERY_STATE_ROOT,
        Command.STARKNET_L1_TO_L2_MESSAGE_NONCE,
        Command.STARKNET_QUERY_CHAIN_ID,
        Command.STARKNET_QUERY_BLOCK_NUMBER,
        Command.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER,
    ],
)
def test_parse_commands_without_arguments(command):
    cli = parse_args([command.network.value, command.cli_name])
    assert cli.command is command
    assert cli.arguments == {}