# beerus_cli

Query Ethereum and StarkNet through a light client, and get back results
that print the way a user expects to read them.

The package has these parts:

- `beerus_cli.model` describes the command tree (`build_parser`,
  `parse_args`, `Cli`, `Command`, `Network`) and the result of a command
  (`CommandResponse`, `ResponseKind`). A response's `str()` is the text
  shown to the user.
- `beerus_cli.ethereum` and `beerus_cli.starknet` hold one coroutine per
  query. Each one checks its input, asks the light client, and wraps the
  answer in a `CommandResponse`.
- `beerus_cli.runner.run(beerus, cli)` sends a parsed command to the right
  query and returns its response.
- `beerus_cli.types` holds the value types and parsers these share:
  `parse_address`, `parse_h256`, `parse_u256`, `parse_field_element`,
  block identifiers (`BlockId`, `parse_block_id`), `BlockTag`, `CallOpts`,
  `TransactionObject`, `BlockHashAndNumber`, `ContractClass`, and
  `format_ether` for showing wei as ether with all eighteen decimals.

## Usage

The `beerus` argument is a light client object you supply. The Ethereum
queries use its `ethereum_lightclient` attribute; the StarkNet queries use
its `starknet_lightclient` attribute and its own `starknet_*` coroutines
(such as `starknet_state_root` and `starknet_get_storage_at`).

```python
import asyncio

from beerus_cli.model import parse_args
from beerus_cli.runner import run

cli = parse_args([
    "ethereum", "query-balance",
    "--address", "0xc24215226336d22238a20a72f8e489c005b44c4a",
])
response = asyncio.run(run(beerus, cli))
print(response)  # e.g. "0.000000000000000123 ETH"
```

The queries can also be called directly:

```python
from beerus_cli import starknet

response = await starknet.query_block_number(beerus)
print(response)  # e.g. "Block number: 123456"
```

## Commands

`parse_args` accepts a network, then a command, then that command's
options. `-c/--config FILE` may be given at any level and is kept in
`Cli.config`; `--version` prints the version.

`ethereum`:
`query-balance -a ADDRESS`, `query-nonce -a ADDRESS`,
`query-block-number`, `query-chain-id`, `query-code -a ADDRESS`,
`query-block-tx-count-by-number -b BLOCK`, `query-tx-by-hash --hash HASH`,
`query-gas-price`, `query-estimate-gas -p PARAMS` (a JSON transaction
object; `to` is required).

`starknet`:
`query-state-root`,
`query-contract -a ADDRESS -s SELECTOR [--calldata A,B,...]`,
`query-get-storage-at -a ADDRESS -k KEY`, `query-nonce -a ADDRESS`,
`l1-to-l2-message-cancellations -m MSG_HASH`,
`l1-to-l2-messages -m MSG_HASH`, `l2-to-l1-messages -m MSG_HASH`,
`l1-to-l2-message-nonce`, `query-chain-id`, `query-block-number`,
`query-block-hash-and-number`,
`query-get-class --block-id-type TYPE --block-id ID --class-hash HASH`
(type is `hash`, `number` or `tag`; a tag is `latest` or `pending`).

## Errors

`parse_args` exits with a usage message on a command line it cannot parse.
Inside a query, an input that does not parse raises `ValueError` before the
light client is called; for example, `"ABCDE"` as an address fails with
`Invalid input length`. An error raised by the light client reaches the
caller of `run` unchanged.

## What this package does not do

- It does not contain a light client. It does not connect to any network,
  sync, or verify anything; every answer comes from the `beerus` object you
  pass in.
- It installs no console command. To use it from a shell, write a small
  entry point that builds your light client, calls `parse_args` and `run`,
  and prints the response.
- `Cli.config` is only recorded; nothing in the package reads the file.