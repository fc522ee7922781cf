import boa
import pytest

from script.deploy_lottery import deploy_lottery_local
from script.deploy_mocks import deploy_mocks
from script.helper_config import LOCAL_CHAIN_ID, get_network_config


@pytest.fixture(scope="session")
def network_config():
    return get_network_config(LOCAL_CHAIN_ID)


@pytest.fixture
def deployer():
    """Default boa account, funded so it can enter the lottery"""
    boa.env.set_balance(boa.env.eoa, 10**20)
    return boa.env.eoa


@pytest.fixture
def players():
    """Three extra funded accounts"""
    addresses = [boa.env.generate_address() for _ in range(3)]
    for addr in addresses:
        boa.env.set_balance(addr, 10**20)
    return addresses


@pytest.fixture
def vrf_coordinator():
    """Deploy the mock VRF coordinator"""
    return deploy_mocks()


@pytest.fixture
def lottery_contract(vrf_coordinator, deployer):
    """Deploy the lottery against the mock, with a funded subscription"""
    lottery, _ = deploy_lottery_local(vrf_coordinator)
    return lottery


@pytest.fixture
def entrance_fee(lottery_contract):
    return lottery_contract.get_entrance_fee()


@pytest.fixture
def interval(lottery_contract):
    return lottery_contract.get_interval()
