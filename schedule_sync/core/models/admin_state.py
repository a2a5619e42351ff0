"""
AdminState model holding the console's in-memory session state.
"""

from pydantic import BaseModel, Field

from .import_report import ImportReport
from .owner import Owner


class AdminState(BaseModel):
    """
    Caller-owned state of an admin session.

    The import and merge functions never reach for global state; whoever
    drives the console passes this container in and serializes imports
    against it.

    Attributes:
        authenticated: Whether the session passed the login gate
        owners: Current owner collection
        history: Import reports, newest first
    """

    authenticated: bool = False
    owners: list[Owner] = Field(default_factory=list)
    history: list[ImportReport] = Field(default_factory=list)

    def find_owner(self, owner_id: str) -> Owner | None:
        for owner in self.owners:
            if owner.id == owner_id:
                return owner
        return None
