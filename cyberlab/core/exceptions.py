"""Domain errors raised by services and translated to HTTP responses by routes."""


class CyberLabError(Exception):
    """Base class for all platform errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PayloadValidationError(CyberLabError):
    """Inbound payload failed schema validation."""


class ReferenceNotFoundError(CyberLabError):
    """A deployment refers to a protocol, architecture or scenario that does not exist."""

    def __init__(self, kind: str):
        super().__init__(f"{kind} not found")
        self.kind = kind


class DeploymentStateError(CyberLabError):
    """Requested operation is not allowed in the deployment's current status."""


class YamlIngestError(CyberLabError):
    """YAML document is empty, malformed or has the wrong shape."""


class EmailAlreadyExistsError(CyberLabError):
    """Registration attempted with an email that is already taken."""

    def __init__(self, email: str):
        super().__init__("Email already exists")
        self.email = email
