"""Models for the collector app.

Playthrough - one row per submitted id; the payload is attached by a later upload
"""
from typing import Optional

from sqlalchemy import LargeBinary, String
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Playthrough(Base):
    __tablename__ = "playthroughs"

    # id is whatever the game client generated (a uuid in practice); it is not validated
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    playthrough: Mapped[Optional[bytes]] = mapped_column(
        LargeBinary().with_variant(mysql.LONGBLOB(), "mysql"), nullable=True)
