import sys
from pathlib import Path

from brownie.utils import color

from scripts.config import load_config
from scripts.context import BrownieContext
from scripts.deployer import Deployer
from scripts.errors import DeployError
from scripts.manifest import DeploymentManifest


def manifest_path(path, root):
    path = Path(path)
    if root is not None and not path.is_absolute():
        path = Path(root) / path
    return path


def main(context=None, config=None):
    if config is None:
        config = load_config()
    if context is None:
        context = BrownieContext()

    manifest = None
    if config.manifest:
        manifest = DeploymentManifest(manifest_path(config.manifest, context.project_root()))
    deployer = Deployer(context, contract_name=config.contract, manifest=manifest)

    try:
        return deployer.run()
    except DeployError as exc:
        print(color.format_tb(exc), file=sys.stderr)
        # `brownie run` turns the exception into exit status 1
        raise
