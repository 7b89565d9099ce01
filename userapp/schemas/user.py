"""User Schema — the wire contract for a User record.

Invariants:
    - JSON keys are user-name, password, first-name, last-name, email (in that order)
    - Every field defaults to "": a missing key decodes to the zero value
    - Unknown keys are ignored
    - UserRecord() (all fields empty) is the "not found" record

Design Decisions:
    - Aliases over renamed attributes: Python code keeps snake_case names,
      populate_by_name lets both spellings construct a record
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """A User as it travels over HTTP and out of the repository."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: str = Field("", alias="user-name")
    password: str = ""
    first_name: str = Field("", alias="first-name")
    last_name: str = Field("", alias="last-name")
    email: str = ""

    @property
    def is_empty(self) -> bool:
        """True for the zero-valued record returned when a lookup misses."""
        return not self.username
