from pydantic import BaseModel, ConfigDict, Field

from models.tables import INT_MIN, INT_MAX



class StudentBase(BaseModel):
    first_name: str
    last_name: str
    age: int = Field(ge=0, le=INT_MAX)



class Student(StudentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(ge=INT_MIN, le=INT_MAX)
