"""Value types and parsers shared by the Ethereum and StarkNet queries."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

FELT_PRIME = 2**251 + 17 * 2**192 + 1
U64_MAX = 2**64 - 1
U256_MAX = 2**256 - 1
WEI_PER_ETHER = 10**18

ADDRESS_LENGTH = 20
H256_LENGTH = 32

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")
_BLOCK_TAGS = ("latest", "pending")
_BLOCK_ID_KINDS = ("hash", "number", "tag")
_TRANSACTION_FIELDS = ("from", "to", "gas", "gas_price", "value", "data", "nonce")


@dataclass(frozen=True)
class BlockTag:
    """An Ethereum block selector: the latest block, or a block by number."""

    number: int | None = None

    def __post_init__(self) -> None:
        if self.number is not None and not 0 <= self.number <= U64_MAX:
            raise ValueError(f"block number out of range: {self.number}")

    @property
    def is_latest(self) -> bool:
        return self.number is None

    def __str__(self) -> str:
        return "latest" if self.number is None else str(self.number)


@dataclass(frozen=True)
class CallOpts:
    """Parameters of an Ethereum call or gas estimate."""

    to: bytes
    from_: bytes | None = None
    gas: int | None = None
    gas_price: int | None = None
    value: int | None = None
    data: bytes | None = None


@dataclass(frozen=True)
class TransactionObject:
    """A transaction as given on the command line in JSON form."""

    to: str
    from_: str | None = None
    gas: str | None = None
    gas_price: str | None = None
    value: str | None = None
    data: str | None = None
    nonce: str | None = None

    @classmethod
    def from_json(cls, text: str) -> TransactionObject:
        """Parse a JSON object; ``to`` is required, the other fields optional."""
        document = json.loads(text)
        if not isinstance(document, dict):
            raise ValueError("invalid type: expected a transaction object")
        if "to" not in document:
            raise ValueError("missing field `to`")
        values: dict[str, str | None] = {}
        for key in _TRANSACTION_FIELDS:
            item = document.get(key)
            if item is None and key == "to":
                raise ValueError("invalid type for field `to`: expected a string")
            if item is not None and not isinstance(item, str):
                raise ValueError(f"invalid type for field `{key}`: expected a string")
            values[key] = item
        return cls(
            to=values["to"],
            from_=values["from"],
            gas=values["gas"],
            gas_price=values["gas_price"],
            value=values["value"],
            data=values["data"],
            nonce=values["nonce"],
        )


@dataclass(frozen=True)
class BlockHashAndNumber:
    """The hash and number of a StarkNet block."""

    block_hash: int
    block_number: int


@dataclass
class ContractClass:
    """A StarkNet contract class definition."""

    program: bytes
    entry_points_by_type: dict[str, Any]
    abi: list[Any] | None = None


@dataclass(frozen=True)
class BlockId:
    """A StarkNet block identifier: by hash, by number, or by tag."""

    kind: str
    value: int | str

    def __post_init__(self) -> None:
        if self.kind not in _BLOCK_ID_KINDS:
            raise ValueError(f"Invalid block id type: {self.kind}")
        if self.kind == "tag" and self.value not in _BLOCK_TAGS:
            raise ValueError(f"Invalid block tag: {self.value}")


def _strip_hex_prefix(text: str) -> str:
    return text[2:] if text.startswith("0x") else text


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits:
        raise ValueError("cannot parse integer from empty string")
    if not set(digits) <= _DEC_DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > U64_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def _decode_fixed_hex(text: str, size: int) -> bytes:
    digits = _strip_hex_prefix(text)
    if len(digits) % 2:
        raise ValueError("Invalid input length")
    for position, char in enumerate(digits[: 2 * size + 2]):
        if char not in _HEX_DIGITS:
            raise ValueError(f"Invalid character '{char}' at position {position}")
    if len(digits) != 2 * size:
        raise ValueError("Invalid input length")
    return bytes.fromhex(digits)


def parse_address(text: str) -> bytes:
    """Parse a 20-byte Ethereum address written in hex, with or without ``0x``."""
    return _decode_fixed_hex(text, ADDRESS_LENGTH)


def parse_h256(text: str) -> bytes:
    """Parse a 32-byte hash written in hex, with or without ``0x``."""
    return _decode_fixed_hex(text, H256_LENGTH)


def parse_u256(text: str) -> int:
    """Parse a 256-bit unsigned integer written in hex, with or without ``0x``."""
    digits = _strip_hex_prefix(text)
    if len(digits) > 64:
        raise ValueError("Invalid string length")
    for position, char in enumerate(digits):
        if char not in _HEX_DIGITS:
            raise ValueError(f"Invalid character {char!r} at position {position}")
    return int(digits, 16) if digits else 0


def parse_field_element(text: str) -> int:
    """Parse a StarkNet field element: hex after ``0x``, decimal otherwise."""
    if text.startswith("0x"):
        digits = text[2:]
        if len(digits) > 64:
            raise ValueError("number out of range")
        if not digits or not set(digits) <= _HEX_DIGITS:
            raise ValueError("invalid character")
        value = int(digits, 16)
    else:
        if not text or not set(text) <= _DEC_DIGITS:
            raise ValueError("invalid character")
        value = int(text)
    if value >= FELT_PRIME:
        raise ValueError("number out of range")
    return value


def parse_block_id(block_id_type: str, block_id: str) -> BlockId:
    """Build a block identifier from its type (hash, number, tag) and its text."""
    if block_id_type == "hash":
        return BlockId("hash", parse_field_element(block_id))
    if block_id_type == "number":
        return BlockId("number", _parse_u64(block_id))
    if block_id_type == "tag":
        if block_id not in _BLOCK_TAGS:
            raise ValueError(f"Invalid block tag: {block_id}")
        return BlockId("tag", block_id)
    raise ValueError(f"Invalid block id type: {block_id_type}")


def format_ether(wei: int) -> str:
    """Format an amount of wei as ether with all eighteen decimals."""
    if not 0 <= wei <= U256_MAX:
        raise ValueError(f"amount out of range: {wei}")
    whole, fraction = divmod(wei, WEI_PER_ETHER)
    return f"{whole}.{fraction:018d}"