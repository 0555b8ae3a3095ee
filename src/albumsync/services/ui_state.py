"""Transient UI flags derived from controller outcomes."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from albumsync.exceptions import CatalogError, ValidationFailure

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching albums"
SEARCH_ERROR = "Error searching albums"
SUBMIT_ERROR = "Error submitting form"
DELETE_ERROR = "Error deleting album"


@dataclass(frozen=True)
class UIState:
    """Render-ready snapshot of the transient flags."""

    dialog_open: bool
    no_results: bool
    error_message: str


class UIStateController:
    """Tracks the empty-result notice, error banner and dialog visibility.

    The dialog flag is not stored here; it is read from the form each time
    so the two can never disagree.
    """

    def __init__(self, dialog_probe: Callable[[], bool]) -> None:
        """Initialize with no notice and no error.

        Args:
            dialog_probe: Returns whether the form dialog is open.
        """
        self._dialog_probe = dialog_probe
        self.no_results = False
        self.error_message = ""

    @property
    def dialog_open(self) -> bool:
        return self._dialog_probe()

    def begin_operation(self) -> None:
        """Clear the error banner before any new operation."""
        self.error_message = ""

    def begin_search(self) -> None:
        self.begin_operation()
        self.no_results = False

    def fetch_succeeded(self) -> None:
        # An empty catalog is not "no results"
        self.no_results = False

    def search_succeeded(self, count: int) -> None:
        self.no_results = count == 0

    def listing_failed(self, message: str, error: CatalogError) -> None:
        """Record a failed fetch or search.

        The notice is raised so stale rows are not read as matches.
        """
        self.no_results = True
        self.report(message, error)

    def report(self, message: str, error: CatalogError) -> None:
        """Show a fixed banner message for a failed operation.

        Validation failures show their own message, which names the blank
        fields.
        """
        logger.warning("%s: %s", message, error)
        if isinstance(error, ValidationFailure):
            self.error_message = error.message
        else:
            self.error_message = message

    def snapshot(self) -> UIState:
        return UIState(
            dialog_open=self.dialog_open,
            no_results=self.no_results,
            error_message=self.error_message,
        )
