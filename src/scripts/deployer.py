from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Optional

from scripts.errors import DeploymentFailed, ManifestError

DEFAULT_CONTRACT = "Staking"


@dataclass(frozen=True)
class Deployment:
    contract_name: str
    address: str
    deployer: str
    network: Optional[str] = None
    chain_id: Optional[int] = None
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    deployed_at: Optional[str] = None

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


class Deployer:
    """
    Deploys a single contract from the context's artifact registry using the
    context's first account, with no constructor arguments.

    Every call to `run` sends a new creation transaction; nothing is reused
    from earlier deployments.
    """

    def __init__(self, context, contract_name=DEFAULT_CONTRACT, manifest=None):
        self.context = context
        self.contract_name = contract_name
        self.manifest = manifest

    def run(self):
        signer = self.context.get_signer()
        print("Deploying contracts with:", signer.address)

        factory = self.context.get_factory(self.contract_name)

        # an unusable manifest must stop us before any funds are spent
        if self.manifest is not None:
            try:
                self.manifest.check()
            except (ValueError, OSError) as exc:
                raise ManifestError(self.manifest.path, exc) from exc

        try:
            contract = factory.deploy({'from': signer})
        except Exception as exc:
            raise DeploymentFailed(self.contract_name, exc) from exc

        address = getattr(contract, "address", None)
        if not address:
            raise DeploymentFailed(self.contract_name, message="no contract address returned")

        print(f"{self.contract_name} deployed to:", address)

        deployment = self._record(signer, contract, address)
        if self.manifest is not None:
            try:
                self.manifest.append(deployment)
            except (ValueError, TypeError, OSError) as exc:
                raise ManifestError(self.manifest.path, exc, address=deployment.address) from exc
        return deployment

    def _record(self, signer, contract, address):
        network_name, chain_id = self.context.network_info()
        # receipt is absent on contracts not created through a transaction
        tx = getattr(contract, "tx", None)
        return Deployment(
            contract_name=self.contract_name,
            address=str(address),
            deployer=str(signer.address),
            network=network_name,
            chain_id=chain_id,
            tx_hash=getattr(tx, "txid", None),
            block_number=getattr(tx, "block_number", None),
            deployed_at=datetime.now(timezone.utc).isoformat(),
        )
