import pytest
from sqlalchemy.pool import StaticPool

from database import DuplicateStudentError, make_engine
from models.tables import StudentRecord
from seed import seed_students
from models.student import Student


def test_in_memory_engine_shares_one_database(context, seed):
    seed({"id": 1, "first_name": "Alice", "last_name": "Smith", "age": 25})

    assert context.find(1).first_name == "Alice"


def test_find_returns_none_for_missing_id(context):
    assert context.find(123) is None


def test_add_is_staged_until_save(context, lookup):
    context.add(StudentRecord(id=4, first_name="Dan", last_name="Fox", age=30))
    assert lookup(4) is None

    context.save()
    assert lookup(4).last_name == "Fox"


def test_remove_is_staged_until_save(context, seed, lookup):
    seed({"id": 4, "first_name": "Dan", "last_name": "Fox", "age": 30})

    context.remove(context.find(4))
    assert lookup(4) is not None

    context.save()
    assert lookup(4) is None


def test_save_raises_duplicate_and_rolls_back(context, seed):
    seed({"id": 1, "first_name": "Alice", "last_name": "Smith", "age": 25})

    context.add(StudentRecord(id=1, first_name="Other", last_name="Person", age=40))
    with pytest.raises(DuplicateStudentError):
        context.save()

    # context stays usable after the rollback
    context.add(StudentRecord(id=2, first_name="Bob", last_name="Brown", age=28))
    context.save()
    assert [r.id for r in context.all()] == [1, 2]


def test_seed_students_skips_existing_ids(context, seed):
    seed({"id": 1, "first_name": "Alice", "last_name": "Smith", "age": 25})
    students = [
        Student(id=1, first_name="Alice", last_name="Smith", age=25),
        Student(id=2, first_name="Bob", last_name="Brown", age=28),
    ]

    assert seed_students(context, students) == 1
    assert len(context.all()) == 2


def test_make_engine_for_file_database(tmp_path):
    engine = make_engine(f"sqlite:///{tmp_path / 'students.db'}")
    try:
        assert engine.url.database.endswith("students.db")
    finally:
        engine.dispose()


def test_find_returns_none_for_id_beyond_integer_range(context, seed):
    seed({"id": 2**63 - 1, "first_name": "Max", "last_name": "Int", "age": 1})

    assert context.find(2**63 - 1).first_name == "Max"
    assert context.find(2**63) is None
    assert context.find(-2**63 - 1) is None


def test_only_in_memory_engine_shares_one_connection(tmp_path):
    memory = make_engine("sqlite://")
    on_disk = make_engine(f"sqlite:///{tmp_path / 'students.db'}")
    try:
        assert isinstance(memory.pool, StaticPool)
        assert not isinstance(on_disk.pool, StaticPool)
    finally:
        memory.dispose()
        on_disk.dispose()
