import os

from brownie import Contract, accounts

from peusd_bridge.trusted_remote import configure_trusted_remote, query_trusted_remote
from peusd_bridge.utils import load_contract

ADMIN_PRIVATE_KEY = os.environ.get("PEUSD_ADMIN_PRIVATE_KEY")
PEUSD_ADDRESS = os.environ.get("PEUSD_ADDRESS")
REMOTE_CHAIN_ID = int(os.environ["PEUSD_REMOTE_CHAIN_ID"])
REMOTE_PEUSD_ADDRESS = os.environ.get("PEUSD_REMOTE_ADDRESS")


def main():
    """
    Trusts a remote PeUSD instance on an already deployed PeUSD.
    Run once per side of the link, each time connected to the network of PEUSD_ADDRESS.
    """
    admin = accounts.add(ADMIN_PRIVATE_KEY)

    peusd = Contract.from_abi(
        "PeUSD",
        PEUSD_ADDRESS,
        load_contract("PeUSD")["abi"],
    )
    print("previous trusted remote", query_trusted_remote(peusd, REMOTE_CHAIN_ID))

    configure_trusted_remote(peusd, REMOTE_CHAIN_ID, REMOTE_PEUSD_ADDRESS, admin)

    print("trusted remote", query_trusted_remote(peusd, REMOTE_CHAIN_ID))
