"""Controller components for albumsync.

Public API:
    QueryComposer - Single active search filter
    RecordStore - Last successful album listing
    FormController - Create/edit buffer, mode and submission
    UIStateController - Dialog, empty-result and error flags
"""

from albumsync.services.form import FormController
from albumsync.services.query import QueryComposer
from albumsync.services.store import RecordStore
from albumsync.services.ui_state import UIState, UIStateController

__all__ = [
    "FormController",
    "QueryComposer",
    "RecordStore",
    "UIState",
    "UIStateController",
]
