import os

from brownie import PeUSD, accounts

from peusd_bridge.deploy_lib import (
    LZ_ARBITRUM_ENDPOINT,
    LZ_ETHEREUM_CHAIN_ID,
    PEUSD_MAINNET_ADDRESS,
    PEUSD_SHARED_DECIMALS,
    deploy_token,
)
from peusd_bridge.trusted_remote import configure_trusted_remote, query_trusted_remote

ADMIN_PRIVATE_KEY = os.environ.get("PEUSD_ADMIN_PRIVATE_KEY")
LZ_ENDPOINT = os.environ.get("PEUSD_LZ_ENDPOINT", LZ_ARBITRUM_ENDPOINT)
REMOTE_CHAIN_ID = int(os.environ.get("PEUSD_REMOTE_CHAIN_ID", LZ_ETHEREUM_CHAIN_ID))
REMOTE_PEUSD_ADDRESS = os.environ.get("PEUSD_REMOTE_ADDRESS", PEUSD_MAINNET_ADDRESS)


def main():
    """
    Deploys PeUSD on the connected network and trusts the PeUSD instance of the remote chain.
    The remote instance has to register this deployment with the pair swapped
    (see set_trusted_remote.py).
    """
    if ADMIN_PRIVATE_KEY:
        admin = accounts.add(ADMIN_PRIVATE_KEY)
    else:
        admin = accounts.load("admin")

    # Prints the deployed address.
    peusd = deploy_token(PeUSD, PEUSD_SHARED_DECIMALS, LZ_ENDPOINT, admin)

    configure_trusted_remote(peusd, REMOTE_CHAIN_ID, REMOTE_PEUSD_ADDRESS, admin)

    print("getTrustedRemoteAddress", query_trusted_remote(peusd, REMOTE_CHAIN_ID))
