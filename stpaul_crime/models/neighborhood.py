"""Neighborhood model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stpaul_crime.database import Base


class Neighborhood(Base):
    __tablename__ = "Neighborhoods"

    neighborhood_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    neighborhood_name: Mapped[str | None] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Neighborhood {self.neighborhood_number}: {self.neighborhood_name}>"
