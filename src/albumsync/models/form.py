"""Form mode: creating a new album or editing an existing one."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateMode:
    """Submitting the form adds a new album."""

    @property
    def title(self) -> str:
        return "Add New Album"

    @property
    def action_label(self) -> str:
        return "Add"


@dataclass(frozen=True)
class EditMode:
    """Submitting the form updates the album with `album_id`."""

    album_id: str

    @property
    def title(self) -> str:
        return "Edit Album"

    @property
    def action_label(self) -> str:
        return "Update"


FormMode = CreateMode | EditMode
