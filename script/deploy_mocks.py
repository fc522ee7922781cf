from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src.mocks import vrf_coordinator_v2_mock

from script.helper_config import BASE_FEE, GAS_PRICE_LINK, is_development_network


def deploy_mocks() -> VyperContract:
    print("Local network detected! Deploying mocks...")
    mock = vrf_coordinator_v2_mock.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"Mock VRF Coordinator at: {mock.address}")
    print("Mocks Deployed!")
    print("----------------------------------")
    print("You are deploying to a local network, you'll need a local network running to interact")
    print("Please run `mox console --network anvil` to interact with the deployed smart contracts!")
    print("----------------------------------")
    return mock


def moccasin_main() -> VyperContract:
    if not is_development_network(get_active_network().name):
        return None
    return deploy_mocks()
