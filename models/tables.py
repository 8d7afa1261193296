from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# range of a SQLite INTEGER
INT_MIN = -2**63
INT_MAX = 2**63 - 1


class StudentRecord(Base):
    __tablename__ = "students"

    # ids are assigned by the caller
    id = Column(Integer, primary_key=True, autoincrement=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<StudentRecord id={self.id} {self.first_name} {self.last_name}>"
