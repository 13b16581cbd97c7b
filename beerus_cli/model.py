"""Command-line arguments and the printable responses of each command."""

from __future__ import annotations

import argparse
import base64
import json
import unicodedata
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable, Sequence

from .types import U64_MAX, BlockHashAndNumber, ContractClass

_VERSION = "0.1.0"


class Network(Enum):
    """The network a command talks to."""

    ETHEREUM = "ethereum"
    STARKNET = "starknet"


class Command(Enum):
    """Every command the tool offers, with its network and its name."""

    ETHEREUM_QUERY_BALANCE = (Network.ETHEREUM, "query-balance")
    ETHEREUM_QUERY_NONCE = (Network.ETHEREUM, "query-nonce")
    ETHEREUM_QUERY_BLOCK_NUMBER = (Network.ETHEREUM, "query-block-number")
    ETHEREUM_QUERY_CHAIN_ID = (Network.ETHEREUM, "query-chain-id")
    ETHEREUM_QUERY_CODE = (Network.ETHEREUM, "query-code")
    ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER = (Network.ETHEREUM, "query-block-tx-count-by-number")
    ETHEREUM_QUERY_TX_BY_HASH = (Network.ETHEREUM, "query-tx-by-hash")
    ETHEREUM_QUERY_GAS_PRICE = (Network.ETHEREUM, "query-gas-price")
    ETHEREUM_QUERY_ESTIMATE_GAS = (Network.ETHEREUM, "query-estimate-gas")
    STARKNET_QUERY_STATE_ROOT = (Network.STARKNET, "query-state-root")
    STARKNET_QUERY_CONTRACT = (Network.STARKNET, "query-contract")
    STARKNET_QUERY_GET_STORAGE_AT = (Network.STARKNET, "query-get-storage-at")
    STARKNET_QUERY_NONCE = (Network.STARKNET, "query-nonce")
    STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS = (Network.STARKNET, "l1-to-l2-message-cancellations")
    STARKNET_L1_TO_L2_MESSAGES = (Network.STARKNET, "l1-to-l2-messages")
    STARKNET_L2_TO_L1_MESSAGES = (Network.STARKNET, "l2-to-l1-messages")
    STARKNET_L1_TO_L2_MESSAGE_NONCE = (Network.STARKNET, "l1-to-l2-message-nonce")
    STARKNET_QUERY_CHAIN_ID = (Network.STARKNET, "query-chain-id")
    STARKNET_QUERY_BLOCK_NUMBER = (Network.STARKNET, "query-block-number")
    STARKNET_QUERY_BLOCK_HASH_AND_NUMBER = (Network.STARKNET, "query-block-hash-and-number")
    STARKNET_QUERY_GET_CLASS = (Network.STARKNET, "query-get-class")

    @property
    def network(self) -> Network:
        return self.value[0]

    @property
    def cli_name(self) -> str:
        return self.value[1]


@dataclass
class Cli:
    """A parsed command line: the command, its arguments and the config file."""

    command: Command
    arguments: dict[str, Any] = field(default_factory=dict)
    config: Path | None = None


def _u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits.isascii() or not digits.isdigit() or int(digits) > U64_MAX:
        raise argparse.ArgumentTypeError(f"invalid unsigned 64-bit value: {text!r}")
    return int(digits)


def _comma_separated(text: str) -> list[str]:
    return text.split(",")


@dataclass(frozen=True)
class _Option:
    dest: str
    metavar: str
    help: str
    short: str | None = None
    convert: Callable[[str], Any] = str
    multiple: bool = False

    @property
    def flags(self) -> list[str]:
        long_flag = "--" + self.dest.replace("_", "-")
        return [f"-{self.short}", long_flag] if self.short else [long_flag]


_ADDRESS = _Option("address", "ADDRESS", "The address to query", short="a")
_CONTRACT_ADDRESS = _Option("address", "ADDRESS", "The address of the contract to query", short="a")
_MSG_HASH = _Option("msg_hash", "MSG_HASH", "The hash of the message", short="m")

_OPTIONS: dict[Command, tuple[_Option, ...]] = {
    Command.ETHEREUM_QUERY_BALANCE: (_ADDRESS,),
    Command.ETHEREUM_QUERY_NONCE: (_ADDRESS,),
    Command.ETHEREUM_QUERY_CODE: (_CONTRACT_ADDRESS,),
    Command.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER: (
        _Option("block", "BLOCK", "The block from which to query the txs count", short="b", convert=_u64),
    ),
    Command.ETHEREUM_QUERY_TX_BY_HASH: (_Option("hash", "HASH", "The transaction hash"),),
    Command.ETHEREUM_QUERY_ESTIMATE_GAS: (
        _Option("params", "params", "The transaction object as JSON", short="p"),
    ),
    Command.STARKNET_QUERY_CONTRACT: (
        _CONTRACT_ADDRESS,
        _Option("selector", "SELECTOR", "The selector of the function to call", short="s"),
        _Option(
            "calldata",
            "CALLDATA",
            "The calldata of the function to call",
            convert=_comma_separated,
            multiple=True,
        ),
    ),
    Command.STARKNET_QUERY_GET_STORAGE_AT: (
        _CONTRACT_ADDRESS,
        _Option("key", "KEY", "The slot of the storage to query", short="k"),
    ),
    Command.STARKNET_QUERY_NONCE: (_CONTRACT_ADDRESS,),
    Command.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS: (_MSG_HASH,),
    Command.STARKNET_L1_TO_L2_MESSAGES: (_MSG_HASH,),
    Command.STARKNET_L2_TO_L1_MESSAGES: (_MSG_HASH,),
    Command.STARKNET_QUERY_GET_CLASS: (
        _Option("block_id_type", "BLOCK_ID_TYPE", "Type of block identifier, eg. hash, number, tag"),
        _Option("block_id", "BLOCK_ID", "The block identifier, eg. 0x123, 123, pending, or latest"),
        _Option("class_hash", "CLASS_HASH", "The class hash"),
    ),
}

_COMMAND_HELP: dict[Command, str] = {
    Command.ETHEREUM_QUERY_BALANCE: "Query the balance of an Ethereum address",
    Command.ETHEREUM_QUERY_NONCE: "Query the nonce of an Ethereum address",
    Command.ETHEREUM_QUERY_BLOCK_NUMBER: "Query the latest block number",
    Command.ETHEREUM_QUERY_CHAIN_ID: "Query the chain id",
    Command.ETHEREUM_QUERY_CODE: "Query the code of a contract",
    Command.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER: "Query the transaction count of a block",
    Command.ETHEREUM_QUERY_TX_BY_HASH: "Query a transaction by its hash",
    Command.ETHEREUM_QUERY_GAS_PRICE: "Query the gas price",
    Command.ETHEREUM_QUERY_ESTIMATE_GAS: "Estimate the gas a transaction needs",
    Command.STARKNET_QUERY_STATE_ROOT: "Query the state root of StarkNet",
    Command.STARKNET_QUERY_CONTRACT: "Query a StarkNet contract view",
    Command.STARKNET_QUERY_GET_STORAGE_AT: "Query a storage slot of a contract",
    Command.STARKNET_QUERY_NONCE: "Query the nonce of a contract",
    Command.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS: "Query the cancellation timestamp of an L1 to L2 message",
    Command.STARKNET_L1_TO_L2_MESSAGES: "Query msg_fee + 1 of an L1 to L2 message",
    Command.STARKNET_L2_TO_L1_MESSAGES: "Query msg_fee + 1 of an L2 to L1 message",
    Command.STARKNET_L1_TO_L2_MESSAGE_NONCE: "The nonce of the L1 to L2 message bridge",
    Command.STARKNET_QUERY_CHAIN_ID: "Query the chain id",
    Command.STARKNET_QUERY_BLOCK_NUMBER: "The current block number of the StarkNet network",
    Command.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER: "The current block hash and number of the StarkNet network",
    Command.STARKNET_QUERY_GET_CLASS: "The contract class definition",
}

_NETWORK_HELP = {
    Network.ETHEREUM: "Ethereum related subcommands",
    Network.STARKNET: "StarkNet related subcommands",
}


def _add_config_option(parser: argparse.ArgumentParser, default: Any) -> None:
    parser.add_argument(
        "-c", "--config", metavar="FILE", default=default, help="Set a custom config file"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for every network and command."""
    parser = argparse.ArgumentParser(prog="beerus", description="Beerus light client command line")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    _add_config_option(parser, None)
    networks = parser.add_subparsers(dest="_network", metavar="COMMAND", required=True)
    for network in Network:
        network_parser = networks.add_parser(
            network.value, help=_NETWORK_HELP[network], description=_NETWORK_HELP[network]
        )
        _add_config_option(network_parser, argparse.SUPPRESS)
        commands = network_parser.add_subparsers(dest="_subcommand", metavar="COMMAND", required=True)
        for command in (c for c in Command if c.network is network):
            command_parser = commands.add_parser(
                command.cli_name, help=_COMMAND_HELP[command], description=_COMMAND_HELP[command]
            )
            _add_config_option(command_parser, argparse.SUPPRESS)
            for option in _OPTIONS.get(command, ()):
                if option.multiple:
                    command_parser.add_argument(
                        *option.flags,
                        dest=option.dest,
                        metavar=option.metavar,
                        type=option.convert,
                        action="extend",
                        default=None,
                        help=option.help,
                    )
                else:
                    command_parser.add_argument(
                        *option.flags,
                        dest=option.dest,
                        metavar=option.metavar,
                        type=option.convert,
                        required=True,
                        help=option.help,
                    )
            command_parser.set_defaults(_command=command)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Cli:
    """Parse a command line into a :class:`Cli`; exits on invalid input."""
    namespace = build_parser().parse_args(argv)
    command: Command = namespace._command
    arguments: dict[str, Any] = {}
    for option in _OPTIONS.get(command, ()):
        value = getattr(namespace, option.dest)
        arguments[option.dest] = ([] if value is None else value) if option.multiple else value
    config = Path(namespace.config) if namespace.config else None
    return Cli(command=command, arguments=arguments, config=config)


class ResponseKind(Enum):
    """The kind of result a command produced."""

    ETHEREUM_QUERY_BALANCE = auto()
    ETHEREUM_QUERY_NONCE = auto()
    ETHEREUM_QUERY_BLOCK_NUMBER = auto()
    ETHEREUM_QUERY_CHAIN_ID = auto()
    ETHEREUM_QUERY_CODE = auto()
    ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER = auto()
    ETHEREUM_QUERY_TX_BY_HASH = auto()
    ETHEREUM_QUERY_GAS_PRICE = auto()
    ETHEREUM_QUERY_ESTIMATE_GAS = auto()
    STARKNET_QUERY_STATE_ROOT = auto()
    STARKNET_QUERY_CONTRACT = auto()
    STARKNET_QUERY_GET_STORAGE_AT = auto()
    STARKNET_QUERY_NONCE = auto()
    STARKNET_QUERY_CHAIN_ID = auto()
    STARKNET_QUERY_BLOCK_NUMBER = auto()
    STARKNET_QUERY_BLOCK_HASH_AND_NUMBER = auto()
    STARKNET_QUERY_GET_CLASS = auto()
    STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS = auto()
    STARKNET_L1_TO_L2_MESSAGES = auto()
    STARKNET_L1_TO_L2_MESSAGE_NONCE = auto()
    STARKNET_L2_TO_L1_MESSAGES = auto()


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}
_UNPRINTABLE_CATEGORIES = frozenset({"Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"})


def _quoted(text: str) -> str:
    """Quote a string with backslash escapes for unprintable characters."""
    pieces = []
    for char in text:
        if char in _ESCAPES:
            pieces.append(_ESCAPES[char])
        elif unicodedata.category(char) in _UNPRINTABLE_CATEGORIES:
            pieces.append(f"\\u{{{ord(char):x}}}")
        else:
            pieces.append(char)
    return '"' + "".join(pieces) + '"'


def _list(values: Sequence[Any]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


def _block_hash_and_number(value: BlockHashAndNumber) -> str:
    return f"Block hash: {value.block_hash}, Block number: {value.block_number}"


def _contract_class(value: ContractClass) -> str:
    if value.abi is None:
        raise ValueError("contract class has no ABI")
    document = {
        "program": base64.b64encode(value.program).decode("ascii"),
        "entry_points_by_type": value.entry_points_by_type,
        "abi": value.abi,
    }
    return json.dumps(document, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


_FORMATTERS: dict[ResponseKind, Callable[[Any], str]] = {
    ResponseKind.ETHEREUM_QUERY_BALANCE: lambda balance: f"{balance} ETH",
    ResponseKind.ETHEREUM_QUERY_NONCE: lambda nonce: f"Nonce: {nonce}",
    ResponseKind.ETHEREUM_QUERY_BLOCK_NUMBER: str,
    ResponseKind.ETHEREUM_QUERY_CHAIN_ID: str,
    ResponseKind.ETHEREUM_QUERY_CODE: _list,
    ResponseKind.ETHEREUM_QUERY_BLOCK_TX_COUNT_BY_NUMBER: str,
    ResponseKind.ETHEREUM_QUERY_TX_BY_HASH: lambda data: f"Transaction Data: {_quoted(data)}",
    ResponseKind.ETHEREUM_QUERY_GAS_PRICE: str,
    ResponseKind.ETHEREUM_QUERY_ESTIMATE_GAS: str,
    ResponseKind.STARKNET_QUERY_STATE_ROOT: str,
    ResponseKind.STARKNET_QUERY_CONTRACT: _list,
    ResponseKind.STARKNET_QUERY_GET_STORAGE_AT: str,
    ResponseKind.STARKNET_QUERY_NONCE: str,
    ResponseKind.STARKNET_QUERY_CHAIN_ID: lambda chain_id: f"Chain id: {chain_id}",
    ResponseKind.STARKNET_QUERY_BLOCK_NUMBER: lambda number: f"Block number: {number}",
    ResponseKind.STARKNET_QUERY_BLOCK_HASH_AND_NUMBER: _block_hash_and_number,
    ResponseKind.STARKNET_QUERY_GET_CLASS: _contract_class,
    ResponseKind.STARKNET_L1_TO_L2_MESSAGE_CANCELLATIONS: str,
    ResponseKind.STARKNET_L1_TO_L2_MESSAGES: str,
    ResponseKind.STARKNET_L1_TO_L2_MESSAGE_NONCE: lambda nonce: f"L1 to L2 Message Nonce: {nonce}",
    ResponseKind.STARKNET_L2_TO_L1_MESSAGES: str,
}


@dataclass
class CommandResponse:
    """The result of a command; ``str()`` gives the text shown to the user."""

    kind: ResponseKind
    value: Any

    def __str__(self) -> str:
        return _FORMATTERS[self.kind](self.value)