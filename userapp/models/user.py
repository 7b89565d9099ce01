"""User ORM — the single persisted table.

Invariants:
    - Table name is "users"; column names are username, password, firstname,
      lastname, email (no underscores, shared with existing databases)
    - username is the key column, so at most one row per username
    - All columns are VARCHAR(255)
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from userapp.db.base import Base


class User(Base):
    """One row per user, keyed by username."""
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(255), primary_key=True)
    password: Mapped[str] = mapped_column(String(255), nullable=True)
    first_name: Mapped[str] = mapped_column(
        "firstname", String(255), nullable=True,
    )
    last_name: Mapped[str] = mapped_column(
        "lastname", String(255), nullable=True,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=True)

    def __repr__(self):
        return f"<User {self.username}>"
