import json
import random

import pytest
from eth_utils import to_checksum_address

from tests.resources.ABI import MARKETPLACE_ABI_JSON, TRC20_ABI_JSON


@pytest.fixture(name="random_address")
def fixture_random_address():
    def _generate_random_address():
        return to_checksum_address(random.randbytes(20).hex())

    return _generate_random_address


@pytest.fixture(name="trc20_abi")
def fixture_trc20_abi():
    return json.loads(TRC20_ABI_JSON)


@pytest.fixture(name="marketplace_abi")
def fixture_marketplace_abi():
    return json.loads(MARKETPLACE_ABI_JSON)
