import os
import time
from typing import Optional

import boa
from moccasin.boa_tools import VyperContract

OPEN = 0
WINNER_PICKED_TIMEOUT = 300  # seconds
POLL_INTERVAL = 5


def enter_lottery(lottery: VyperContract, value: Optional[int] = None) -> None:
    if value is None:
        value = lottery.get_entrance_fee()
    lottery.enter_lottery(value=value)
    print(f"Entered lottery {lottery.address} with {value} wei")


def wait_for_winner_picked(
    lottery: VyperContract,
    starting_timestamp: int,
    timeout: float = WINNER_PICKED_TIMEOUT,
    poll_interval: float = POLL_INTERVAL,
    sleep=time.sleep,
    clock=time.monotonic,
) -> str:
    """Block until the lottery has drawn a winner after `starting_timestamp`.

    A draw is complete once the last timestamp has moved past the one taken
    before entering and the lottery is open again. Returns the recent winner.
    Raises TimeoutError if that does not happen within `timeout` seconds.
    """
    deadline = clock() + timeout
    while True:
        if lottery.get_last_timestamp() > starting_timestamp and lottery.get_lottery_state() == OPEN:
            winner = lottery.get_recent_winner()
            print(f"Winner picked: {winner}")
            return winner
        if clock() >= deadline:
            raise TimeoutError(f"no winner picked on {lottery.address} within {timeout} seconds")
        sleep(poll_interval)


def moccasin_main() -> None:
    from src import lottery as lottery_contract

    lottery = lottery_contract.at(os.environ["LOTTERY_ADDRESS"])
    print(f"Entering from: {boa.env.eoa}")
    enter_lottery(lottery)
