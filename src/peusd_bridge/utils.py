import json
import os
from typing import Tuple, Union

from eth_abi.packed import encode_packed
from eth_utils import (
    is_address,
    is_checksum_address,
    is_checksum_formatted_address,
    to_checksum_address,
)

# Point to the ROOT_DIRECTORY_OF_THE_PROJECT/artifacts.
ARTIFACTS = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "artifacts")

ADDRESS_LENGTH = 20
CHAIN_ID_BOUND = 2**16
DECIMALS_BOUND = 2**8

AddressLike = Union[str, bytes]


def load_contract(name: str) -> dict:
    """
    Loads a contract json from the artifacts directory.
    """
    with open(os.path.join(ARTIFACTS, f"{name}.json")) as artifact:
        return json.load(artifact)


def to_address(value: AddressLike) -> str:
    """
    Returns the checksummed form of a 20 bytes address given as hex or raw bytes.
    Mixed-case hex is accepted only with a valid checksum.
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise ValueError(f"{value!r} is not a valid address")
        value = "0x" + bytes(value).hex()
    if not is_address(value):
        raise ValueError(f"{value!r} is not a valid address")
    if is_checksum_formatted_address(value) and not is_checksum_address(value):
        raise ValueError(f"{value!r} is not a valid address (bad checksum)")
    return to_checksum_address(value)


def validate_chain_id(chain_id: int) -> int:
    # LayerZero chain ids are stored as uint16.
    if isinstance(chain_id, bool) or not isinstance(chain_id, int):
        raise ValueError(f"Chain id must be an int, got {chain_id!r}")
    if not 0 <= chain_id < CHAIN_ID_BOUND:
        raise ValueError(f"Chain id {chain_id} out of range for uint16")
    return chain_id


def validate_decimals(decimals: int) -> int:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise ValueError(f"Decimals must be an int, got {decimals!r}")
    if not 0 <= decimals < DECIMALS_BOUND:
        raise ValueError(f"Decimals {decimals} out of range for uint8")
    return decimals


def pack_trusted_remote(remote_address: AddressLike, local_address: AddressLike) -> bytes:
    """
    Packs the trusted remote path, equivalent to solidity's
    abi.encodePacked(remoteAddress, localAddress).
    The order is fixed: the remote chain registers the same pair swapped.
    """
    return encode_packed(
        ["address", "address"],
        [to_address(remote_address), to_address(local_address)],
    )


def unpack_trusted_remote(path: bytes) -> Tuple[str, str]:
    """
    Splits a packed path into (remote_address, local_address).
    """
    if len(path) != 2 * ADDRESS_LENGTH:
        raise ValueError(f"Trusted remote path must be {2 * ADDRESS_LENGTH} bytes, got {len(path)}")
    return (
        to_address(path[:ADDRESS_LENGTH]),
        to_address(path[ADDRESS_LENGTH:]),
    )
