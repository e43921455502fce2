"""Client for the execution-layer engine API, authenticated with JWT."""

from __future__ import annotations

import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import httpx
import jwt

from ream.jsonrpc import Claims, JsonRpcRequest, strip_prefix, unwrap_response
from ream.rpc_types import (
    BlobsAndProofV1,
    ExecutionPayloadV3,
    ForkchoiceStateV1,
    ForkchoiceUpdateResult,
    PayloadAttributesV3,
    PayloadStatusV1,
    PayloadV3,
    SyncingInfo,
    parse_eth_syncing,
)
from ream.transaction import BlobTransaction, TransactionType

ENGINE_CAPABILITIES = (
    "engine_forkchoiceUpdatedV3",
    "engine_getBlobsV1",
    "engine_getPayloadV3",
    "engine_newPayloadV3",
)


def _hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


class ExecutionEngine:
    """Speaks JSON-RPC to an execution client's engine API endpoint."""

    def __init__(
        self,
        jwt_path: str | Path,
        engine_api_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        jwt_file = Path(jwt_path).read_text()
        try:
            self._jwt_key = bytes.fromhex(strip_prefix(jwt_file.rstrip()))
        except ValueError as err:
            raise ValueError(f"JWT key file does not hold valid hex: {err}") from err
        self.engine_api_url = engine_api_url
        self._client = httpx.AsyncClient(transport=transport)

    async def __aenter__(self) -> ExecutionEngine:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    def create_jwt_token(self) -> str:
        """A fresh HS256 token whose ``iat`` is the current time."""
        claims = Claims(iat=int(time.time()))
        try:
            return jwt.encode(claims.to_json(), self._jwt_key, algorithm="HS256")
        except jwt.PyJWTError as err:
            raise RuntimeError(f"Could not encode jwt key {err!r}") from err

    def blob_versioned_hashes(self, transactions: Iterable[bytes]) -> list[bytes]:
        """Versioned hashes carried by the blob transactions among ``transactions``."""
        hashes: list[bytes] = []
        for transaction in transactions:
            transaction = bytes(transaction)
            if TransactionType.from_transaction(transaction) is TransactionType.BLOB_TRANSACTION:
                hashes.extend(BlobTransaction.decode(transaction[1:]).blob_versioned_hashes)
        return hashes

    def build_request(self, rpc_request: JsonRpcRequest) -> httpx.Request:
        """An authenticated POST request carrying ``rpc_request``."""
        return self._client.build_request(
            "POST",
            self.engine_api_url,
            json=rpc_request.to_json(),
            headers={"Authorization": f"Bearer {self.create_jwt_token()}"},
        )

    async def _call(self, method: str, params: list[Any]) -> Any:
        request = self.build_request(JsonRpcRequest(method=method, params=params))
        response = await self._client.send(request)
        return unwrap_response(response.json())

    async def eth_syncing(self) -> SyncingInfo | bool:
        return parse_eth_syncing(await self._call("eth_syncing", []))

    async def engine_exchange_capabilities(self) -> list[str]:
        result = await self._call("engine_exchangeCapabilities", [list(ENGINE_CAPABILITIES)])
        if not isinstance(result, list) or not all(isinstance(item, str) for item in result):
            raise ValueError(f"unexpected capabilities result {result!r}")
        return result

    async def engine_get_payload_v3(self, payload_id: bytes) -> PayloadV3:
        payload_id = bytes(payload_id)
        if len(payload_id) != 8:
            raise ValueError("payload_id must be 8 bytes")
        return PayloadV3.from_json(await self._call("engine_getPayloadV3", [_hex(payload_id)]))

    async def engine_new_payload_v3(
        self,
        execution_payload: ExecutionPayloadV3,
        expected_blob_versioned_hashes: Iterable[bytes],
        parent_beacon_block_root: bytes,
    ) -> PayloadStatusV1:
        params = [
            execution_payload.to_json(),
            [_hex(item) for item in expected_blob_versioned_hashes],
            _hex(parent_beacon_block_root),
        ]
        return PayloadStatusV1.from_json(await self._call("engine_newPayloadV3", params))

    async def engine_forkchoice_updated_v3(
        self,
        forkchoice_state: ForkchoiceStateV1,
        payload_attributes: PayloadAttributesV3 | None,
    ) -> ForkchoiceUpdateResult:
        params = [
            forkchoice_state.to_json(),
            None if payload_attributes is None else payload_attributes.to_json(),
        ]
        return ForkchoiceUpdateResult.from_json(
            await self._call("engine_forkchoiceUpdatedV3", params)
        )

    async def engine_get_blobs_v1(
        self, blob_version_hashes: Iterable[bytes]
    ) -> list[BlobsAndProofV1 | None]:
        result = await self._call(
            "engine_getBlobsV1", [[_hex(item) for item in blob_version_hashes]]
        )
        if not isinstance(result, list):
            raise ValueError(f"unexpected getBlobs result {result!r}")
        return [None if item is None else BlobsAndProofV1.from_json(item) for item in result]