from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def upsert_insert(self, table):
        """Dialect insert() supporting ON CONFLICT clauses."""
        dialect = self.db.get_bind().dialect.name
        if dialect == 'postgresql':
            return postgresql.insert(table)
        if dialect == 'sqlite':
            return sqlite.insert(table)
        raise NotImplementedError(f"ON CONFLICT inserts are not supported for dialect '{dialect}'")
