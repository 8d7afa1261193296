import csv
import re
from typing import List, Dict, Optional, Tuple

from models.student import Student
from models.tables import INT_MIN, INT_MAX


def _parse_int(s: Optional[str]) -> Optional[int]:
    if not s:
        return None
    # first integer substring (handles values like "#12", "25 years", " 7 ")
    m = re.search(r'[-+]?\d+', s)
    if not m:
        return None
    return int(m.group())


def _split_name(full_name: str) -> Tuple[str, str]:
    parts = full_name.split(None, 1)
    if not parts:
        return '', ''
    if len(parts) == 1:
        return parts[0], ''
    return parts[0], parts[1]


def _first(norm: Dict[str, str], *keys: str) -> str:
    for key in keys:
        if norm.get(key):
            return norm[key]
    return ''


def read_students_csv(file_path: str) -> List[Student]:
    """
    Read a CSV file (e.g. dummy_students.csv) and return the students in it.
    Supports flexible headers: 'id', 'student_id'; 'first_name', 'first name', 'firstname';
    'last_name', 'last name', 'lastname', 'surname'; 'age'; or one 'name' / 'full name' column.
    Rows without an id are skipped, as are repeats of an id already read.
    """
    with open(file_path, newline='', encoding='utf-8') as fh:
        reader = csv.DictReader(fh)
        rows = list(reader)

    students = []
    seen_ids = set()

    for row in rows:
        norm = {k.strip().lower(): (v.strip() if v is not None else '') for k, v in row.items() if k}

        student_id = _parse_int(_first(norm, 'id', 'student_id', 'student id'))
        if student_id is None or not INT_MIN <= student_id <= INT_MAX or student_id in seen_ids:
            continue

        first_name = _first(norm, 'first_name', 'first name', 'firstname')
        last_name = _first(norm, 'last_name', 'last name', 'lastname', 'surname')
        if not first_name and not last_name:
            first_name, last_name = _split_name(_first(norm, 'name', 'full name', 'student'))

        age = _parse_int(norm.get('age'))
        if age is None or age < 0:
            age = 0

        seen_ids.add(student_id)
        students.append(Student(id=student_id, first_name=first_name, last_name=last_name, age=age))

    return students


if __name__ == '__main__':
    # simple demo: expects dummy_students.csv in current directory
    import json
    parsed = read_students_csv('dummy_students.csv')
    print(json.dumps([s.model_dump() for s in parsed], indent=2, ensure_ascii=False))
