from pathlib import Path


class LicenseError(Exception):
    """
    Base class for every error the license cache reports to the user.
    """


class ProviderError(LicenseError):
    """
    Raised by an index provider when the remote source errors or answers with a non-success status.
    """


class ConfigError(LicenseError):
    pass


class FetchFailedError(LicenseError):

    def __init__(self, detail: str = ""):

        message = "Failed to fetch license data"

        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class DeserializeFailedError(LicenseError):
    """
    Raised when index or detail bytes are not well-formed license JSON.
    Parameters
    ----------
    payload : bytes
        The bytes that failed to decode, kept for diagnostics.
    reason : str, optional
        What was wrong with them.
    """

    def __init__(self, payload: bytes, reason: str = ""):

        self.payload = payload
        message = f"Failed to deserialize license data ({len(payload)} bytes)"

        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CreateTempDirFailedError(LicenseError):

    def __init__(self, detail: str = ""):

        super().__init__(f"Failed to create temporary directory {detail}".rstrip())


class CreateDirFailedError(LicenseError):

    def __init__(self, path: Path):

        self.path = path
        super().__init__(f"Failed to create directory {path}")


class WriteFileFailedError(LicenseError):

    def __init__(self, path: Path):

        self.path = path
        super().__init__(f"Failed to write file {path}")


class RemovePathFailedError(LicenseError):

    def __init__(self, path: Path):

        self.path = path
        super().__init__(f"Failed to remove {path}")


class CopyTreeFailedError(LicenseError):

    def __init__(self, src: Path, dst: Path):

        self.src, self.dst = src, dst
        super().__init__(f"Failed to move {src} to {dst}")


class ReadFailedError(LicenseError):

    def __init__(self, detail: str = ""):

        message = "Failed to read local licenses. Try running 'getlicense bootstrap'"

        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class CannotLocateHomeDirError(LicenseError):

    def __init__(self):

        super().__init__("Cannot locate the user's home directory")
