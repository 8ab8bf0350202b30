"""Deployed contract address lookups."""

from __future__ import annotations

import logging
import time
from typing import Mapping

import requests
from eth_typing import ChecksumAddress, HexStr
from eth_utils import to_checksum_address

ZERO_ADDRESS = ChecksumAddress("0x0000000000000000000000000000000000000000")
# Resolved for chains without a deployment; web3 rejects it as an address, so calls fail before reaching the chain
UNRESOLVED_ADDRESS = ChecksumAddress("0x")
# Empty bytes32, e.g. for metadata without a hash
HASH_ZERO = HexStr("0x" + "00" * 32)

# Attempts and seconds between attempts when the artifacts server is not ready yet
ARTIFACTS_FETCH_ATTEMPTS = 10
ARTIFACTS_FETCH_BACKOFF = 5


def resolve_address(address_table: Mapping[int, str], chain_id: int | None = None) -> ChecksumAddress:
    """Get the deployed address of a contract for a chain.

    Unknown chains resolve to the empty address "0x" rather than raising; calls made against it fail later
    at the transport with an address error.

    Arguments
    ---------
    address_table: Mapping[int, str]
        Deployed addresses keyed by chain id.
    chain_id: int | None, optional
        The chain to look up.

    Returns
    -------
    ChecksumAddress
        The deployed address, or UNRESOLVED_ADDRESS if the chain is not in the table.
    """
    if chain_id is None or chain_id not in address_table:
        logging.debug('No deployed address for chain_id=%s, using "0x"', chain_id)
        return UNRESOLVED_ADDRESS
    return to_checksum_address(address_table[chain_id])


def fetch_deployment_addresses_from_uri(
    artifacts_uri: str,
    attempts: int = ARTIFACTS_FETCH_ATTEMPTS,
    backoff: float = ARTIFACTS_FETCH_BACKOFF,
) -> dict[str, ChecksumAddress]:
    """Fetch addresses for a custom deployment of the protocol from an artifacts server.

    The server returns a flat json object of contract name to address, e.g.
    `{"AccessController": "0x..", "DisputeModule": "0x.."}`.

    Arguments
    ---------
    artifacts_uri: str
        The URI for the artifacts endpoint.
    attempts: int, optional
        How many times to request before giving up on non-200 responses.
    backoff: float, optional
        Seconds to sleep between attempts.

    Returns
    -------
    dict[str, ChecksumAddress]
        Checksummed addresses keyed by contract name.
    """
    response = None
    for _ in range(attempts):
        response = requests.get(artifacts_uri, timeout=60)
        # Check the status code and retry the request if it fails
        if response.status_code != 200:
            logging.warning(
                "Request for artifacts_uri=%s failed with status code %s @ %s",
                artifacts_uri,
                response.status_code,
                time.ctime(),
            )
            time.sleep(backoff)
            continue
        # If successful, exit attempt loop
        break
    if response is None:
        raise ConnectionError("Request failed, returning status `None`")
    if response.status_code != 200:
        raise ConnectionError(f"Request failed with status code {response.status_code} @ {time.ctime()}")
    addresses_json = response.json()
    return {name: to_checksum_address(address) for name, address in addresses_json.items()}
