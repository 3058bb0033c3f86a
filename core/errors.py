"""Error taxonomy shared by the remote adapter, the session and the CLI."""


class BeadsError(RuntimeError):
    pass


class FetchError(BeadsError):
    """Remote list/show failed."""


class NotFoundError(FetchError):
    def __init__(self, issue_id: str):
        super().__init__(f"Issue not found: {issue_id}")
        self.issue_id = issue_id


class ValidationError(BeadsError, ValueError):
    pass


class WriteError(BeadsError):
    """Remote update failed. Local optimistic state is left as is."""


class EmptyResultError(BeadsError):
    def __init__(self, term: str):
        super().__init__(f'No matches for "{term}"')
        self.term = term


__all__ = [
    "BeadsError",
    "FetchError",
    "NotFoundError",
    "ValidationError",
    "WriteError",
    "EmptyResultError",
]
