from alembic import context
from sqlmodel import SQLModel
from app.core.config import settings
from app.core.database import create_db_engine

# Import all models here so Alembic can detect them
from app.models import (  # noqa: F401
    Language,
    VocabularyWord,
    LearningTip,
)

# this is the Alembic Config object
config = context.config

# settings.database_url already uses the postgresql:// scheme
config.set_main_option("sqlalchemy.url", settings.database_url)

# Import metadata for autogenerate
target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = create_db_engine(settings.database_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection, target_metadata=target_metadata
        )

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
