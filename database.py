import logging
from typing import Iterator, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import FlushError
from sqlalchemy.pool import StaticPool

from config import DATABASE_URL
from models.tables import Base, StudentRecord, INT_MIN, INT_MAX

logger = logging.getLogger(__name__)


class DuplicateStudentError(Exception):
    """Raised by save() when a staged student collides with a stored id."""



# Database Connection

def make_engine(url: str = DATABASE_URL):
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise each session gets its own empty database.
            # Sessions share its transaction too: meant for tests and a single worker.
            return create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(url, connect_args=connect_args)
    return create_engine(url)


def create_database(bind=None):
    Base.metadata.create_all(bind=bind or engine)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)



# Persistence context

class StudentContext:
    """Unit of work over the students table.

    Changes staged with add() and remove() only reach the database on save().
    """

    def __init__(self, session: Session):
        self.session = session

    def find(self, student_id: int) -> Optional[StudentRecord]:
        if not INT_MIN <= student_id <= INT_MAX:
            # cannot be stored, so cannot exist
            return None
        return self.session.get(StudentRecord, student_id)

    def all(self) -> List[StudentRecord]:
        return self.session.query(StudentRecord).order_by(StudentRecord.id).all()

    def add(self, record: StudentRecord):
        self.session.add(record)

    def remove(self, record: StudentRecord):
        self.session.delete(record)

    def save(self):
        try:
            self.session.commit()
        except (IntegrityError, FlushError) as e:
            self.session.rollback()
            logger.warning("Rolled back students save: %s", e)
            raise DuplicateStudentError(str(e)) from e

    def close(self):
        self.session.close()


def get_db() -> Iterator[StudentContext]:
    context = StudentContext(SessionLocal())
    try:
        yield context
    finally:
        context.close()


if __name__ == "__main__":
    create_database()
