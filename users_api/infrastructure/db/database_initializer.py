# Standard library imports
import asyncio
import logging
from uuid import uuid4

# Local application imports
from ...domain.constants import UserFields
from .sqlite_connection import DbConnectionFactory, register_uuid_type

logger = logging.getLogger(__name__)


CREATE_USERS_TABLE = (
    f"CREATE TABLE IF NOT EXISTS {UserFields.TABLE} "
    f"({UserFields.ID} TEXT PRIMARY KEY, {UserFields.FULL_NAME} TEXT NOT NULL)"
)


class DatabaseInitializer:
    """
    Bootstraps the users store.
    
    Safe to run on every startup: registers the UUID type handling, creates
    the Users table if it is missing and seeds a single known user unless a
    user with that name already exists.
    """
    
    def __init__(self, connection_factory: DbConnectionFactory, seed_full_name: str = "Peter Parker") -> None:
        self.connection_factory = connection_factory
        self.seed_full_name = seed_full_name
    
    async def initialize(self) -> None:
        register_uuid_type()
        await asyncio.to_thread(self._create_schema)
        await asyncio.to_thread(self._seed)
    
    def _create_schema(self) -> None:
        with self.connection_factory.connect() as connection:
            connection.execute(CREATE_USERS_TABLE)
    
    def _seed(self) -> None:
        with self.connection_factory.connect() as connection:
            existing = connection.execute(
                f"SELECT 1 FROM {UserFields.TABLE} WHERE {UserFields.FULL_NAME} = ?",
                (self.seed_full_name,),
            ).fetchone()
            if existing is not None:
                logger.debug(f"Seed user '{self.seed_full_name}' already present")
                return
            
            connection.execute(
                f"INSERT INTO {UserFields.TABLE} ({UserFields.ID}, {UserFields.FULL_NAME}) VALUES (?, ?)",
                (uuid4(), self.seed_full_name),
            )
            logger.info(f"Seeded user '{self.seed_full_name}'")
