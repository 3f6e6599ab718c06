class DeployError(Exception):
    pass


class NoSignerAvailable(DeployError):
    def __init__(self, message="no signing account available in the active network"):
        super().__init__(message)


class ArtifactNotFound(DeployError):
    def __init__(self, name):
        super().__init__(f"contract artifact '{name}' not found in the loaded project")
        self.name = name


class DeploymentFailed(DeployError):
    """ Deployment of `name` did not produce a contract; the original error is kept in `cause` """

    def __init__(self, name, cause=None, message=None):
        if message is None:
            message = f"{type(cause).__name__}: {cause}" if cause is not None else "unknown error"
        super().__init__(f"deployment of '{name}' failed: {message}")
        self.name = name
        self.cause = cause


class ManifestError(DeployError):
    """ The deployment manifest could not be read or written; `address` is set when the contract was already deployed """

    def __init__(self, path, cause, address=None):
        message = f"deployment manifest {path}: {type(cause).__name__}: {cause}"
        if address is not None:
            message = f"contract deployed to {address} but not recorded in {message}"
        super().__init__(message)
        self.path = path
        self.cause = cause
        self.address = address
