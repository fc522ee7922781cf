import os
from typing import Optional

import boa
from eth_account import Account
from eth_account.signers.local import LocalAccount
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src import lottery as lottery_contract

from script.deploy_mocks import deploy_mocks
from script.helper_config import (
    LOCAL_CHAIN_ID,
    SUBSCRIPTION_FUND_AMOUNT,
    get_network_config,
    is_development_network,
    resolve_chain_id,
)
from script.update_frontend import update_frontend


def load_deployer_account(network_name: str) -> Optional[LocalAccount]:
    """Register the PRIVATE_KEY account with boa on anything but the in-memory chain."""
    private_key = os.environ.get("PRIVATE_KEY")
    if network_name == "pyevm" or not private_key:
        return None
    account = Account.from_key(private_key)
    boa.env.add_account(account, force_eoa=True)
    print(f"Deploying from: {account.address}")
    return account


def create_subscription(vrf_coordinator: VyperContract, fund_amount: int = SUBSCRIPTION_FUND_AMOUNT) -> int:
    subscription_id = vrf_coordinator.createSubscription()
    vrf_coordinator.fundSubscription(subscription_id, fund_amount)
    print(f"Created VRF subscription {subscription_id} funded with {fund_amount}")
    return subscription_id


def deploy_lottery_local(
    vrf_coordinator: Optional[VyperContract] = None, chain_id: int = LOCAL_CHAIN_ID
) -> tuple[VyperContract, VyperContract]:
    if vrf_coordinator is None:
        vrf_coordinator = deploy_mocks()
    config = get_network_config(chain_id)
    subscription_id = create_subscription(vrf_coordinator)

    lottery = lottery_contract.deploy(*config.constructor_args(vrf_coordinator.address, subscription_id))
    vrf_coordinator.addConsumer(subscription_id, lottery.address)
    print(f"Lottery deployed at: {lottery.address}")
    return lottery, vrf_coordinator


def deploy_lottery_live(chain_id: int) -> VyperContract:
    config = get_network_config(chain_id)
    vrf_coordinator = config.require("vrf_coordinator_v2")
    subscription_id = int(os.environ.get("VRF_SUBSCRIPTION_ID") or config.require("subscription_id"))

    lottery = lottery_contract.deploy(*config.constructor_args(vrf_coordinator, subscription_id))
    print(f"Lottery deployed at: {lottery.address}")
    print(f"Add it as a consumer of subscription {subscription_id} and register an upkeep for it")
    return lottery


def deploy_lottery() -> VyperContract:
    active_network = get_active_network()
    chain_id = resolve_chain_id(active_network.name, active_network.chain_id)
    load_deployer_account(active_network.name)

    if is_development_network(active_network.name):
        lottery, _ = deploy_lottery_local(chain_id=chain_id)
    else:
        lottery = deploy_lottery_live(chain_id)
        if active_network.has_explorer():
            print("Verifying contract...")
            result = active_network.moccasin_verify(lottery)
            result.wait_for_verification()

    update_frontend(lottery, chain_id)
    return lottery


def moccasin_main() -> VyperContract:
    return deploy_lottery()
