class TgdriveError(Exception):
    pass


class MalformedKey(TgdriveError):
    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"malformed key {key!r}: {reason}")
        self.key = key
        self.reason = reason


class PeerNotFound(TgdriveError):
    def __init__(self, peer_id: int, last_error: Exception | None) -> None:
        super().__init__(f"failed to resolve peer {peer_id}: {last_error}")
        self.peer_id = peer_id
        self.last_error = last_error


class ObjectNotFound(TgdriveError):
    def __init__(self, key: str) -> None:
        super().__init__(f"object not found: {key}")
        self.key = key


class NotImplementedOperation(TgdriveError):
    """Raised by every mutating operation, the drive is read only"""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not supported")
        self.operation = operation


class StreamClosedError(TgdriveError):
    pass
