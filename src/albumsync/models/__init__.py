"""Data models for albumsync.

Public API:
    Album - Catalog entry parsed from service responses
    EditBuffer - Create/edit form values
    SearchField - Filterable album attributes
    SearchQuery - Single active filter (field, value)
    CreateMode, EditMode - Form mode variants
    CancelToken - Teardown marker for discarding late responses
"""

from albumsync.models.album import REQUIRED_FIELDS, Album, EditBuffer
from albumsync.models.cancel import CancelToken
from albumsync.models.enums import SearchField
from albumsync.models.form import CreateMode, EditMode, FormMode
from albumsync.models.query import FullListing, Listing, SearchListing, SearchQuery

__all__ = [
    "REQUIRED_FIELDS",
    "Album",
    "CancelToken",
    "CreateMode",
    "EditBuffer",
    "EditMode",
    "FormMode",
    "FullListing",
    "Listing",
    "SearchField",
    "SearchListing",
    "SearchQuery",
]
