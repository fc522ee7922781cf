from dataclasses import dataclass, fields
from typing import Optional

LOCAL_CHAIN_ID = 31337
DEVELOPMENT_CHAINS = ["pyevm", "anvil"]

# VRF coordinator mock, local networks only
BASE_FEE = 25 * 10**16  # 0.25 LINK premium per request
GAS_PRICE_LINK = 10**9  # LINK per gas
SUBSCRIPTION_FUND_AMOUNT = 30 * 10**18


class MissingNetworkConfigError(KeyError):
    """Raised when a chain has no entry, or its entry lacks a required field."""

    def __str__(self):
        return self.args[0] if self.args else super().__str__()


@dataclass(frozen=True)
class NetworkConfigItem:
    chain_id: int
    name: Optional[str] = None
    subscription_id: Optional[str] = None
    gas_lane: Optional[str] = None
    keepers_update_interval: Optional[str] = None
    lottery_entrance_fee: Optional[str] = None
    callback_gas_limit: Optional[str] = None
    vrf_coordinator_v2: Optional[str] = None

    def require(self, field: str) -> str:
        if field not in {f.name for f in fields(self)}:
            raise AttributeError(f"NetworkConfigItem has no field {field!r}")
        value = getattr(self, field)
        if value is None:
            raise MissingNetworkConfigError(
                f"{field} is not configured for chain {self.chain_id} ({self.name})"
            )
        return value

    def constructor_args(self, vrf_coordinator: str, subscription_id: int) -> tuple:
        """Lottery constructor arguments, in declaration order."""
        gas_lane = self.require("gas_lane")
        return (
            vrf_coordinator,
            int(self.require("lottery_entrance_fee")),
            bytes.fromhex(gas_lane.removeprefix("0x")),
            subscription_id,
            int(self.require("callback_gas_limit")),
            int(self.require("keepers_update_interval")),
        )


NETWORK_CONFIG = {
    LOCAL_CHAIN_ID: NetworkConfigItem(
        chain_id=LOCAL_CHAIN_ID,
        name="localhost",
        subscription_id="5429",
        gas_lane="0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",  # 30 gwei
        keepers_update_interval="30",
        lottery_entrance_fee="100000000000000000",  # 0.1 ETH
        callback_gas_limit="500000",
    ),
    11155111: NetworkConfigItem(
        chain_id=11155111,
        name="sepolia",
        gas_lane="0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c",  # 30 gwei
        keepers_update_interval="30",
        lottery_entrance_fee="10000000000000000",  # 0.01 ETH
        callback_gas_limit="500000",
        vrf_coordinator_v2="0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
    ),
    5: NetworkConfigItem(
        chain_id=5,
        name="goerli",
        subscription_id="5429",
        gas_lane="0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",  # 150 gwei
        keepers_update_interval="30",
        lottery_entrance_fee="100000000000000000",  # 0.1 ETH
        callback_gas_limit="500000",
        vrf_coordinator_v2="0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D",
    ),
    1: NetworkConfigItem(
        chain_id=1,
        name="mainnet",
        gas_lane="0x8af398995b04c28e9951adb9721ef74c74f93e6a478f39e7e0777be13527e7ef",
        keepers_update_interval="30",
    ),
}


def is_development_network(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def resolve_chain_id(network_name: str, chain_id: Optional[int]) -> int:
    """Local backends report whatever chain id they like; config for them is always keyed by LOCAL_CHAIN_ID."""
    if is_development_network(network_name):
        return LOCAL_CHAIN_ID
    if chain_id is None:
        raise MissingNetworkConfigError(f"network {network_name} has no chain_id")
    return int(chain_id)


def get_network_config(chain_id: int) -> NetworkConfigItem:
    try:
        return NETWORK_CONFIG[chain_id]
    except KeyError:
        raise MissingNetworkConfigError(f"no network config for chain {chain_id}") from None
