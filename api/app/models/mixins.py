"""
Column helpers shared by the reference data models.
"""
import uuid
from datetime import datetime
from typing import Optional
from sqlalchemy import DateTime, Enum as SAEnum, func
from sqlmodel import Field
from app.models.enums import DifficultyLevel, enum_values


def id_field() -> uuid.UUID:
    # Generated in the application (uuid4) per row on insert, including Core
    # INSERTs issued by the seeder. Only the alembic schema adds a database-side
    # gen_random_uuid() default.
    return Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        sa_column_kwargs={"default": uuid.uuid4},
    )


def timestamp_field() -> Optional[datetime]:
    # Defaults to the store's now(); the seeder sets it explicitly per row
    return Field(
        default=None,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"server_default": func.now(), "nullable": False},
    )


def difficulty_field() -> DifficultyLevel:
    return Field(
        sa_type=SAEnum(DifficultyLevel, name="difficulty_level", values_callable=enum_values),
        sa_column_kwargs={"nullable": False},
    )
