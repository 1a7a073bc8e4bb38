"""Incident model for St. Paul crime reports."""

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stpaul_crime.database import Base


class Incident(Base):
    """
    A recorded crime event with location, time, and classification code.

    date_time is kept as ISO text (YYYY-MM-DDTHH:MM:SS) so SQLite's
    date() and time() functions can split it.
    """

    __tablename__ = "Incidents"

    case_number: Mapped[str] = mapped_column(String(20), primary_key=True)
    date_time: Mapped[str] = mapped_column(String(19), nullable=False)

    # Classification
    code: Mapped[int | None] = mapped_column(Integer, ForeignKey("Codes.code"), index=True)
    incident: Mapped[str | None] = mapped_column(String(255))

    # Location
    police_grid: Mapped[int | None] = mapped_column(Integer, index=True)
    neighborhood_number: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("Neighborhoods.neighborhood_number"), index=True
    )
    block: Mapped[str | None] = mapped_column(String(255))

    __table_args__ = (
        # Newest-first listing
        Index("idx_incidents_date_time", date_time.desc()),
    )

    def __repr__(self) -> str:
        return f"<Incident {self.case_number}: {self.incident}>"
