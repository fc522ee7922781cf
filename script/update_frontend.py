import json
import os
from pathlib import Path

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.helper_config import resolve_chain_id

FRONTEND_ADDRESSES_FILE = "../nextjs-decentralized-lottery/constants/contractAddresses.json"
FRONTEND_ABI_FILE = "../nextjs-decentralized-lottery/constants/abi.json"


def frontend_enabled() -> bool:
    return bool(os.environ.get("UPDATE_FRONTEND"))


def addresses_file() -> Path:
    return Path(os.environ.get("FRONTEND_ADDRESSES_FILE", FRONTEND_ADDRESSES_FILE))


def abi_file() -> Path:
    return Path(os.environ.get("FRONTEND_ABI_FILE", FRONTEND_ABI_FILE))


def update_contract_addresses(address: str, chain_id: int, path: Path) -> dict:
    """Add `address` to the list kept for `chain_id`, keeping entries unique.

    The file maps chain ids (as strings) to every address the lottery was
    deployed at on that chain. A file that does not exist yet is treated as
    an empty mapping.
    """
    path = Path(path)
    current_addresses = json.loads(path.read_text()) if path.exists() else {}
    key = str(chain_id)
    if key in current_addresses:
        if address not in current_addresses[key]:
            current_addresses[key].append(address)
    else:
        current_addresses[key] = [address]
    path.write_text(json.dumps(current_addresses))
    return current_addresses


def update_abi(abi: list, path: Path) -> None:
    Path(path).write_text(json.dumps(abi))


def update_frontend(lottery: VyperContract, chain_id: int) -> bool:
    if not frontend_enabled():
        return False
    print("updating frontend...")
    update_contract_addresses(str(lottery.address), chain_id, addresses_file())
    update_abi(lottery.abi, abi_file())
    print(f"Frontend updated for chain {chain_id}")
    return True


def moccasin_main() -> bool:
    from src import lottery as lottery_contract

    active_network = get_active_network()
    lottery = lottery_contract.at(os.environ["LOTTERY_ADDRESS"])
    return update_frontend(lottery, resolve_chain_id(active_network.name, active_network.chain_id))
