"""PawPicker — pick a directory or a file on a server exposing /v1/files/browse and /v1/files/read-file."""

from pawpicker.breadcrumbs import derive_breadcrumbs
from pawpicker.errors import (
    ApplicationError,
    ConnectivityError,
    HttpError,
    PickerError,
    ReadError,
)
from pawpicker.models import (
    Breadcrumb,
    Entry,
    EntryType,
    FileContent,
    Listing,
    NavigationState,
    SelectionMode,
)
from pawpicker.navigator import Navigator
from pawpicker.transport import FilesClient

__all__ = [
    "ApplicationError",
    "Breadcrumb",
    "ConnectivityError",
    "Entry",
    "EntryType",
    "FileContent",
    "FilesClient",
    "HttpError",
    "Listing",
    "NavigationState",
    "Navigator",
    "PickerError",
    "ReadError",
    "SelectionMode",
    "derive_breadcrumbs",
]
