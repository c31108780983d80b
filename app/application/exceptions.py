class LLMUpstreamError(RuntimeError):
    """Raised when LLM provider fails (timeouts, network errors, service unavailable)."""
    pass


class LLMContractError(RuntimeError):
    """Raised when LLM adapter violates contract (bad format or missing data)."""
    pass


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""
    pass


class ConflictError(ValueError):
    """Raised when a record would duplicate an existing one."""
    pass


class AuthenticationError(PermissionError):
    """Raised for bad credentials and invalid, expired or mis-purposed tokens."""
    pass


class ForbiddenError(PermissionError):
    """Raised when an authenticated user acts on a record owned by someone else."""
    pass


class StorageError(RuntimeError):
    """Raised when the photo storage provider rejects or fails an upload."""
    pass
