"""Errors raised by fact repositories."""


class RemoteStoreError(Exception):
    """Raised when the remote store cannot serve a request.

    Covers transport failures, non-2xx responses and rows that do not match
    the Fact model.
    """

    def __init__(self, detail: str = "Remote store request failed"):
        super().__init__(detail)
