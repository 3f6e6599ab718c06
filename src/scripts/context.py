import brownie
from brownie import chain, network

from scripts.errors import ArtifactNotFound, NoSignerAvailable


class DeployContext:
    """
    Everything a deployment needs from the surrounding framework: a signing
    account, the compiled contract factories, and the active network.
    """

    def get_signer(self):
        raise NotImplementedError

    def get_factory(self, name):
        raise NotImplementedError

    def network_info(self):
        """ (network name, chain id); either may be None when not connected """
        return None, None

    def project_root(self):
        """ directory that relative paths in the project config refer to """
        return None


class BrownieContext(DeployContext):

    def __init__(self, accounts=None, project=None):
        self.accounts = brownie.accounts if accounts is None else accounts
        self._project = project

    @property
    def project(self):
        if self._project is not None:
            return self._project
        loaded = brownie.project.get_loaded_projects()
        return loaded[0] if loaded else None

    def get_signer(self):
        if len(self.accounts) == 0:
            raise NoSignerAvailable()
        return self.accounts[0]

    def get_factory(self, name):
        proj = self.project
        if proj is None:
            raise ArtifactNotFound(name)
        container = proj.dict().get(name)
        if container is None:
            raise ArtifactNotFound(name)
        return container

    def project_root(self):
        proj = self.project
        return None if proj is None else proj._path

    def network_info(self):
        if not network.is_connected():
            return None, None
        return network.show_active(), chain.id
