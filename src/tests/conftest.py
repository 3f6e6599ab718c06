import pytest

import eth_abi
from eth_account import Account
from eth_utils import keccak, to_checksum_address

from scripts.context import DeployContext
from scripts.errors import ArtifactNotFound, NoSignerAvailable


class FakeReceipt:
    def __init__(self, txid, block_number):
        self.txid = txid
        self.block_number = block_number


class FakeContract:
    def __init__(self, address, tx=None):
        self.address = address
        self.tx = tx


class FakeContainer:
    """ stands in for a brownie ContractContainer; addresses follow sender + nonce """

    def __init__(self, name, error=None):
        self._name = name
        self.error = error
        self.deploy_calls = []
        self.nonce = 0

    def deploy(self, *args):
        self.deploy_calls.append(args)
        if self.error is not None:
            raise self.error
        tx_params = args[-1]
        sender = tx_params['from'].address
        digest = keccak(eth_abi.encode(['address', 'uint256'], [sender, self.nonce]))
        address = to_checksum_address(digest[12:])
        tx = FakeReceipt("0x" + keccak(digest).hex(), 100 + self.nonce)
        self.nonce += 1
        return FakeContract(address, tx)


class FakeContext(DeployContext):

    def __init__(self, accounts, containers, network=("development", 1337), root=None):
        self.accounts = accounts
        self.containers = containers
        self.network = network
        self.root = root
        self.factory_lookups = []

    def get_signer(self):
        if not self.accounts:
            raise NoSignerAvailable()
        return self.accounts[0]

    def get_factory(self, name):
        self.factory_lookups.append(name)
        if name not in self.containers:
            raise ArtifactNotFound(name)
        return self.containers[name]

    def network_info(self):
        return self.network

    def project_root(self):
        return self.root


class FakeProject:
    def __init__(self, containers, path=None):
        self._containers = containers
        self._path = path

    def dict(self):
        return dict(self._containers)


@pytest.fixture
def deployer_account():
    return Account.create()

@pytest.fixture
def staking():
    return FakeContainer("Staking")

@pytest.fixture
def context(deployer_account, staking):
    return FakeContext([deployer_account], {"Staking": staking})

@pytest.fixture
def manifest_path(tmp_path):
    return tmp_path / "deployments" / "deployments.json"

@pytest.fixture
def make_container():
    return FakeContainer

@pytest.fixture
def make_context():
    return FakeContext

@pytest.fixture
def make_project():
    return FakeProject
