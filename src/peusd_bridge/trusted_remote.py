"""
Trusted remote registration for LzApp based contracts.

A LayerZero app accepts a message only if the path it arrives on matches the trusted remote
stored for the source chain. The path is the packed pair (remote address, local address), so
both sides of a link must be configured, each with the pair swapped.
"""
from typing import Any, NamedTuple, Optional

from eth_utils import to_bytes

from peusd_bridge.utils import (
    AddressLike,
    pack_trusted_remote,
    to_address,
    unpack_trusted_remote,
    validate_chain_id,
)


class TrustedRemoteBinding(NamedTuple):
    local_address: str
    remote_chain_id: int
    remote_address: str

    @property
    def path(self) -> bytes:
        return pack_trusted_remote(self.remote_address, self.local_address)

    def mirror(self, local_chain_id: int) -> "TrustedRemoteBinding":
        """
        The binding the remote contract has to register for the link to be accepted both ways.
        """
        return TrustedRemoteBinding(
            local_address=self.remote_address,
            remote_chain_id=validate_chain_id(local_chain_id),
            remote_address=self.local_address,
        )


def _as_bytes(value: Any) -> bytes:
    # Frameworks return bytes outputs either as hex strings or as bytes subclasses.
    if isinstance(value, str):
        return to_bytes(hexstr=value)
    return bytes(value)


def binding_for(contract, remote_chain_id: int, remote_address: AddressLike) -> TrustedRemoteBinding:
    return TrustedRemoteBinding(
        local_address=to_address(contract.address),
        remote_chain_id=validate_chain_id(remote_chain_id),
        remote_address=to_address(remote_address),
    )


def configure_trusted_remote(contract, remote_chain_id: int, remote_address: AddressLike, account):
    """
    Trusts remote_address on remote_chain_id as the peer of contract.
    Sends setTrustedRemote from account, which must own the contract. Any revert or network
    error is propagated.
    """
    binding = binding_for(contract, remote_chain_id, remote_address)
    return contract.setTrustedRemote(binding.remote_chain_id, binding.path, {"from": account})


def get_trusted_remote_path(contract, remote_chain_id: int) -> bytes:
    """
    Returns the raw path stored for remote_chain_id, empty bytes if none was set.
    """
    return _as_bytes(contract.trustedRemoteLookup(validate_chain_id(remote_chain_id)))


def query_trusted_remote(contract, remote_chain_id: int) -> Optional[str]:
    """
    Returns the trusted remote address configured for remote_chain_id, or None if the chain id
    was never configured.
    """
    path = get_trusted_remote_path(contract, remote_chain_id)
    if len(path) == 0:
        return None
    remote_address, _ = unpack_trusted_remote(path)
    return remote_address


def is_trusted_remote(contract, remote_chain_id: int, remote_address: AddressLike) -> bool:
    binding = binding_for(contract, remote_chain_id, remote_address)
    return get_trusted_remote_path(contract, binding.remote_chain_id) == binding.path


def link_trusted_remotes(
    local_contract,
    local_chain_id: int,
    local_account,
    remote_contract,
    remote_chain_id: int,
    remote_account,
):
    """
    Configures both directions of a link, the local side first.
    Each contract handle must be connected to its own chain.
    """
    local_binding = binding_for(local_contract, remote_chain_id, remote_contract.address)
    remote_binding = local_binding.mirror(local_chain_id)

    local_tx = configure_trusted_remote(
        local_contract, local_binding.remote_chain_id, local_binding.remote_address, local_account
    )
    remote_tx = configure_trusted_remote(
        remote_contract, remote_binding.remote_chain_id, remote_binding.remote_address, remote_account
    )
    return local_tx, remote_tx
