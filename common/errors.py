class CollectError(Exception):
    """Recoverable failure of a single collect cycle."""


class UpstreamFetchError(CollectError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f'Failed to fetch {url}: {reason}')
        self.url = url
        self.reason = reason


class UpstreamDecodeError(CollectError):
    pass


class InvalidRecordError(CollectError):
    def __init__(self, index: int, reason: str) -> None:
        super().__init__(f'Invalid upstream record at index {index}: {reason}')
        self.index = index
        self.reason = reason
