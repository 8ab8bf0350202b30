"""Executing calls from an IP account and reading its state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from eth_typing import ChecksumAddress, HexStr
from eth_utils import to_checksum_address
from hexbytes import HexBytes

from ..contracts import IPAccountImplClient
from ._resource import ResourceClient, TxOptions, tx_hash_response


@dataclass
class IPAccountExecuteRequest:
    """Have an IP account call another contract.

    Attributes
    ----------
    account_address: str
        The IP account (the ip id) that makes the call.
    to: str
        The contract to call.
    value: int
        Wei the IP account sends along from its own balance.
    data: bytes | str
        The calldata, e.g. from a client's `_encode` method.
    tx_options: TxOptions | None
        Options for sending the transaction.
    """

    account_address: str
    to: str
    value: int
    data: bytes | str
    tx_options: TxOptions | None = None


@dataclass
class IPAccountExecuteWithSigRequest:
    """Have an IP account call another contract on behalf of a signer."""

    account_address: str
    to: str
    value: int
    data: bytes | str
    signer: str
    deadline: int
    signature: bytes | str
    tx_options: TxOptions | None = None


@dataclass
class TokenResponse:
    """The NFT an IP account is bound to."""

    chain_id: int
    token_contract: ChecksumAddress
    token_id: int


class IPAccountClient(ResourceClient):
    """Executes transactions from IP accounts, the token bound accounts behind each IP asset.

    Every IP asset has its own account contract, so each call takes the account address rather than the
    client holding one.
    """

    def _ip_account(self, account_address: str) -> Any:
        # Reads do not touch the wallet, so the account client works without one
        return IPAccountImplClient(self.transport, self.wallet, to_checksum_address(account_address))  # type: ignore

    async def execute(self, request: IPAccountExecuteRequest) -> dict[str, Any]:
        """Call a contract from an IP account. The sender must be allowed to act for the account.

        Arguments
        ---------
        request: IPAccountExecuteRequest
            The account, the target and the calldata.

        Returns
        -------
        dict[str, Any]
            `tx_hash` of the execute transaction.
        """
        self._check_wallet("execute from an IP account")
        tx_hash = await self._ip_account(request.account_address).execute(
            to=to_checksum_address(request.to), value=request.value, data=HexBytes(request.data)
        )
        logging.debug("Executed call to %s from IP account %s", request.to, request.account_address)
        await self._wait_if_requested(tx_hash, request.tx_options)
        return tx_hash_response(tx_hash)

    async def execute_with_sig(self, request: IPAccountExecuteWithSigRequest) -> dict[str, Any]:
        """Call a contract from an IP account with a signature of an account signer.

        Arguments
        ---------
        request: IPAccountExecuteWithSigRequest
            The account, the target, the calldata and the signer's signature over them.

        Returns
        -------
        dict[str, Any]
            `tx_hash` of the execute transaction.
        """
        self._check_wallet("execute from an IP account")
        tx_hash = await self._ip_account(request.account_address).execute_with_sig(
            to=to_checksum_address(request.to),
            value=request.value,
            data=HexBytes(request.data),
            signer=to_checksum_address(request.signer),
            deadline=request.deadline,
            signature=HexBytes(request.signature),
        )
        await self._wait_if_requested(tx_hash, request.tx_options)
        return tx_hash_response(tx_hash)

    async def get_ip_account_nonce(self, ip_id: str) -> HexStr:
        """Get the state of an IP account, which changes with every executed call.

        Arguments
        ---------
        ip_id: str
            The IP account.

        Returns
        -------
        HexStr
            The bytes32 state as a 0x prefixed string.
        """
        state = await self._ip_account(ip_id).state()
        return HexStr(HexBytes(state).to_0x_hex())

    async def get_token(self, ip_id: str) -> TokenResponse:
        """Get the NFT an IP account is bound to.

        Arguments
        ---------
        ip_id: str
            The IP account.

        Returns
        -------
        TokenResponse
            The chain id, contract and id of the token.
        """
        token = await self._ip_account(ip_id).token()
        return TokenResponse(
            chain_id=token["value0"], token_contract=to_checksum_address(token["value1"]), token_id=token["value2"]
        )
