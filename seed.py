import logging
import sys

from config import LOG_LEVEL
from database import SessionLocal, StudentContext, DuplicateStudentError, create_database
from models.tables import StudentRecord
from students_csv import read_students_csv

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


def seed_students(context: StudentContext, students) -> int:
    inserted = 0
    for s in students:
        context.add(StudentRecord(**s.model_dump()))
        try:
            context.save()
            inserted += 1
        except DuplicateStudentError:
            # likely rerun where the id already exists
            logger.info("Skipped student %s: id already stored", s.id)
    return inserted


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else 'dummy_students.csv'

    create_database()
    students = read_students_csv(path)

    context = StudentContext(SessionLocal())
    try:
        inserted = seed_students(context, students)
        logger.info("Inserted %d of %d students from %s", inserted, len(students), path)
        logger.info("students sample: %s", context.all()[:5])
    finally:
        context.close()
