from peusd_bridge.utils import AddressLike, to_address, validate_decimals

# LayerZero chain ids (not the EVM chain ids).
LZ_ETHEREUM_CHAIN_ID = 101
LZ_ARBITRUM_CHAIN_ID = 110

LZ_ARBITRUM_ENDPOINT = "0x3c2269811836af69497E5F486A85D7316753cf62"
PEUSD_MAINNET_ADDRESS = "0xD585aaafA2B58b1CD75092B51ade9Fa4Ce52F247"
PEUSD_SHARED_DECIMALS = 8


def deploy_token(container, decimals: int, endpoint: AddressLike, account):
    """
    Deploys a PeUSD instance bound to the given LayerZero endpoint.
    container is the framework's contract factory (e.g. brownie's PeUSD container).
    """
    decimals = validate_decimals(decimals)
    endpoint = to_address(endpoint)
    token = container.deploy(decimals, endpoint, {"from": account})
    print(f"{container._name} contract address:", token.address)
    return token
