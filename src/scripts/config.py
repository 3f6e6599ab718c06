from dataclasses import dataclass
from typing import Optional

from brownie import config

from scripts.deployer import DEFAULT_CONTRACT

SECTION = "deployment"


@dataclass(frozen=True)
class DeployConfig:
    contract: str = DEFAULT_CONTRACT
    manifest: Optional[str] = None

    @classmethod
    def from_mapping(cls, data):
        data = dict(data or {})
        unknown = set(data) - {"contract", "manifest"}
        if unknown:
            raise ValueError(f"unknown keys in '{SECTION}' config: {', '.join(sorted(unknown))}")

        contract = data.get("contract", DEFAULT_CONTRACT)
        if not isinstance(contract, str) or not contract:
            raise ValueError(f"'{SECTION}.contract' must be a non-empty string")

        manifest = data.get("manifest")
        if manifest is not None:
            manifest = str(manifest)
        return cls(contract=contract, manifest=manifest)


def load_config():
    """ read the `deployment` section of the active brownie-config.yaml """
    return DeployConfig.from_mapping(config.get(SECTION))
