"""Cancellation token for controller teardown."""


class CancelToken:
    """Marks a controller as torn down.

    Requests already in flight run to completion; callers check the token
    once the response arrives and drop the result if it is set. Tokens are
    single-use - once cancelled they stay cancelled.

    Example:
        >>> token = CancelToken()
        >>> albums = await client.fetch_all()
        >>> if token.is_cancelled:
        ...     return  # Owner is gone, discard
    """

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        """Signal that results should no longer be applied."""
        self._cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled
