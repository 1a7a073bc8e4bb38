"""Code model for incident classification codes."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stpaul_crime.database import Base


class Code(Base):
    """Enumerated classification identifying an incident type."""

    __tablename__ = "Codes"

    code: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    incident_type: Mapped[str | None] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"<Code {self.code}: {self.incident_type}>"
