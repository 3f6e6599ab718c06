import json
import os
import tempfile
from pathlib import Path

from scripts.deployer import Deployment


class DeploymentManifest:
    """
    Append-only JSON record of deployments:

        {"deployments": [{"contract_name": ..., "address": ..., ...}, ...]}
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self):
        if not self.path.exists():
            return {"deployments": []}
        with self.path.open() as fp:
            data = json.load(fp)
        if not isinstance(data, dict) or not isinstance(data.get("deployments"), list):
            raise ValueError(f"{self.path} is not a deployment manifest")
        return data

    def check(self):
        """ fail if the manifest exists but cannot be appended to """
        self._load()

    def entries(self):
        entries = []
        for d in self._load()["deployments"]:
            try:
                entries.append(Deployment.from_dict(d))
            except TypeError as exc:
                raise ValueError(f"{self.path} has a malformed deployment entry: {exc}") from exc
        return entries

    def append(self, deployment):
        data = self._load()
        data["deployments"].append(deployment.to_dict())

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as fp:
                json.dump(data, fp, indent=2)
                fp.write("\n")
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise
