# ream

Building blocks for a beacon chain client: consensus containers with SSZ
hash tree roots, shuffling and domain helpers, key and signature
containers, an asyncio task executor, RLP and blob transaction decoding,
and an async Engine API client.

## Modules

- `ream.constants` — mainnet preset constants (`SLOTS_PER_EPOCH`,
  `SHUFFLE_ROUND_COUNT`, `DOMAIN_*`, `FAR_FUTURE_EPOCH`, ...).
- `ream.ssz` — SHA-256 merkleization: `pack_bytes`, `merkleize`,
  `mix_in_length`, `uint64_root`, `bytes_root`, `container_root`.
- `ream.containers` — frozen dataclasses `ForkData`, `SigningData`,
  `HistoricalSummary`, `LatestMessage`, `VoluntaryExit` and `Withdrawal`,
  each with `hash_tree_root()`. Field sizes and uint64 ranges are checked on
  construction and raise `ValueError`. `ForkData` adds
  `compute_fork_data_root()` and `compute_fork_digest()`; `Withdrawal` has
  `to_json()` / `from_json()`.
- `ream.misc` — `compute_signing_root`, `compute_shuffled_index`
  (swap-or-not shuffle), `compute_committee`, `is_shuffling_stable`,
  `compute_epoch_at_slot`, `compute_start_slot_at_epoch`,
  `compute_activation_exit_epoch`, `compute_domain`, `is_sorted_and_unique`
  and `xor`.
- `ream.kzg_commitment` — `KZGCommitment` (48 bytes) with `from_str`,
  `calculate_versioned_hash`, `hash_tree_root` and `to_json`. `str()` gives a
  shortened form such as `0x53fa…adac`; `repr()` gives the full hex.
- `ream.bls` — `PubKey` (48 bytes), `BLSSignature` (96 bytes, with
  `infinity()`), `AggregatePubKey`, the `BLSError` exception and the `DST`
  constant. Keys and signatures parse from and print to hex.
- `ream.validator` — `Validator` with withdrawal, slashing, activity and
  activation-queue predicates, and `hash_tree_root()`.
- `ream.network_spec` — `Network`, `NetworkSpec` and `network_parser`,
  which accepts `mainnet`, `holesky` or `sepolia` and raises `ValueError`
  otherwise.
- `ream.executor` — `ReamExecutor`, which runs an asyncio loop on a
  background thread. `spawn`, `spawn_cancellable`, `spawn_blocking` and
  `spawn_many` return `concurrent.futures.Future` objects; `block_on` waits
  for one. `shutdown()` signals every task spawned so far: `spawn` tasks
  fail with `TaskCancelledError`, cancellable tasks receive the signal as an
  `asyncio.Event`. `close()` (or leaving a `with` block) cancels what is
  left and stops the loop.
- `ream.rlp` — `encode` and strict `decode`, raising `RLPError`.
- `ream.transaction` — `TransactionType.from_transaction`, `AccessListItem`
  and `BlobTransaction` with `decode` / `encode` of the RLP payload (without
  the type byte).
- `ream.jsonrpc` — `JsonRpcRequest`, JWT `Claims`, `strip_prefix` and
  `unwrap_response`, which raises `JsonRpcError` when a response has no
  `result`.
- `ream.rpc_types` — Engine API types and their JSON forms:
  `PayloadStatus`, `PayloadStatusV1`, `SyncingInfo` / `parse_eth_syncing`,
  `ForkchoiceStateV1`, `PayloadAttributesV3`, `ForkchoiceUpdateResult`,
  `BlobsAndProofV1`, `ExecutionPayloadV3`, `BlobsBundleV1` and `PayloadV3`.
- `ream.execution_engine` — `ExecutionEngine`, an `httpx`-based async client
  that signs every request with a fresh HS256 JWT. Methods: `eth_syncing`,
  `engine_exchange_capabilities`, `engine_get_payload_v3`,
  `engine_new_payload_v3`, `engine_forkchoice_updated_v3`,
  `engine_get_blobs_v1`, plus `create_jwt_token`, `build_request`,
  `blob_versioned_hashes` and `aclose`. It is also an async context
  manager, and accepts an optional `httpx` transport.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Compute a signing domain and a fork digest:

```python
from ream.constants import DOMAIN_BEACON_PROPOSER
from ream.containers import ForkData
from ream.misc import compute_domain

domain = compute_domain(DOMAIN_BEACON_PROPOSER, None, None)
digest = ForkData(bytes(4), bytes(32)).compute_fork_digest()
```

Shuffle validator indices into a committee:

```python
from ream.misc import compute_committee

committee = compute_committee(list(range(100)), bytes(32), 0, 4)
```

Parse a KZG commitment:

```python
from ream.kzg_commitment import KZGCommitment

commitment = KZGCommitment.from_str("0x" + "00" * 48)
print(commitment)                      # shortened display form
commitment.calculate_versioned_hash()  # 32 bytes, first byte 0x01
```

Run tasks with a shared shutdown signal:

```python
import asyncio
from ream.executor import ReamExecutor

async def wait_or_stop(shutdown):
    await asyncio.wait_for(shutdown.wait(), timeout=5)
    return "stopped"

with ReamExecutor() as executor:
    handle = executor.spawn_cancellable(wait_or_stop)
    executor.shutdown()
    print(executor.block_on(handle))
```

Query an execution client over the Engine API:

```python
import asyncio
from ream.execution_engine import ExecutionEngine

async def main():
    async with ExecutionEngine("jwt.hex", "http://localhost:8551") as engine:
        print(await engine.engine_exchange_capabilities())
        print(await engine.eth_syncing())

asyncio.run(main())
```

The JWT file holds the hex-encoded shared secret, with or without a `0x`
prefix.

## What this package does not do

- It has no command-line program and does not run a beacon node.
- It does no peer-to-peer networking or peer discovery.
- It has no fork-choice store, beacon state or block processing.
- `ream.bls` only holds and hashes key and signature bytes; it does not
  sign, verify or aggregate BLS signatures.
- SSZ support covers hash tree roots only; there is no SSZ serialization.