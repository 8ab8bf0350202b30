"""The signer boundary that write clients broadcast through, and a local private key implementation."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from eth_account.signers.local import LocalAccount
from eth_typing import ChecksumAddress
from hexbytes import HexBytes
from web3 import Web3
from web3.types import Nonce, TxParams, Wei

from .errors import ContractCallException, ContractCallType
from .retry_call import retry_call
from .transport import ContractCallRequest

# Attempts for nonce lookups
READ_RETRY_COUNT = 5


class Wallet(Protocol):
    """Holds key material and broadcasts simulated calls."""

    @property
    def account(self) -> ChecksumAddress | None:
        """The address transactions are sent from."""

    def write_contract(self, request: ContractCallRequest) -> Any:
        """Sign and broadcast a simulated call, returning the transaction handle."""


class LocalAccountWallet:
    """Signs transactions with a local private key and sends them through a web3 provider.

    Arguments
    ---------
    web3: Web3
        web3 provider object
    signer: LocalAccount
        The LocalAccount that will be used to pay for the gas & sign the transaction
    max_priority_fee: int | None, optional
        Tip in wei for the block producer. Defaults to the node's suggestion.
    """

    def __init__(self, web3: Web3, signer: LocalAccount, max_priority_fee: int | None = None) -> None:
        self.web3 = web3
        self.signer = signer
        self.max_priority_fee = max_priority_fee

    @property
    def account(self) -> ChecksumAddress:
        """The address of the signer."""
        return Web3.to_checksum_address(self.signer.address)

    def build_transaction(self, request: ContractCallRequest, nonce: Nonce | None = None) -> TxParams:
        """Fill in nonce, gas and fees for a simulated call.

        Arguments
        ---------
        request: ContractCallRequest
            The simulated call.
        nonce: Nonce | None
            If set, will explicitly set the nonce to this value, otherwise will use web3 to get transaction count

        Returns
        -------
        TxParams
            The unsigned transaction.
        """
        # TODO figure out which exception here to retry on
        base_nonce = retry_call(READ_RETRY_COUNT, None, self.web3.eth.get_transaction_count, self.account)
        if nonce is None:
            nonce = base_nonce
        # An explicit nonce below the transaction count would be rejected by the node
        if base_nonce > nonce:
            logging.warning("Specified nonce %s is below the current transaction count %s", nonce, base_nonce)
            nonce = base_nonce

        unsent_txn: TxParams = {
            "from": self.account,
            "to": request.to,
            "data": request.data,
            "value": Wei(request.value or 0),
            "nonce": nonce,
            "chainId": self.web3.eth.chain_id,
        }
        max_priority_fee = self.max_priority_fee
        if max_priority_fee is None:
            max_priority_fee = self.web3.eth.max_priority_fee
        pending_block = self.web3.eth.get_block("pending")
        base_fee = pending_block.get("baseFeePerGas", None)
        if base_fee is None:
            raise AssertionError("The pending block does not have a baseFeePerGas")
        unsent_txn["gas"] = self.web3.eth.estimate_gas(unsent_txn)
        unsent_txn["maxFeePerGas"] = Wei(max_priority_fee + 2 * base_fee)
        unsent_txn["maxPriorityFeePerGas"] = Wei(max_priority_fee)
        return unsent_txn

    def write_contract(self, request: ContractCallRequest) -> HexBytes:
        """Sign and broadcast a simulated call.

        Arguments
        ---------
        request: ContractCallRequest
            The simulated call, as returned by the transport.

        Returns
        -------
        HexBytes
            The transaction hash.
        """
        unsent_txn: TxParams | None = None
        try:
            unsent_txn = self.build_transaction(request)
            signed_txn = self.signer.sign_transaction(unsent_txn)  # type: ignore
            tx_hash = self.web3.eth.send_raw_transaction(signed_txn.raw_transaction)
        except Exception as err:
            raise ContractCallException(
                "Error sending transaction",
                orig_exception=err,
                contract_call_type=ContractCallType.TRANSACTION,
                function_name_or_signature=request.function_name_or_signature,
                fn_args=request.args,
                fn_kwargs={},
                raw_txn=dict(unsent_txn) if unsent_txn is not None else None,
            ) from err
        logging.debug(
            "Sent %s to %s in transaction %s", request.function_name_or_signature, request.to, tx_hash.to_0x_hex()
        )
        return tx_hash
