"""
Pydantic schemas for employee records.

``EmployeeCreate`` is the request body for registering an employee; it
carries everything except the identifier, which the registry assigns.
``Employee`` is the stored record and the response body of every
endpoint.  ``Gender`` values travel over the wire as upper-case names
(``"MALE"``/``"FEMALE"``); incoming text is upper-cased before it is
matched.
"""

from enum import Enum

from pydantic import BaseModel, Field, validator


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class EmployeeBase(BaseModel):
    name: str = Field(..., example="John Smith")
    age: int = Field(..., example=32)
    gender: Gender = Field(..., example="MALE")
    salary: float = Field(..., example=5000.0)

    @validator("gender", pre=True)
    def upper_case_gender(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v


class EmployeeCreate(EmployeeBase):
    """Schema for registering an employee.

    Any ``id`` sent by the client is dropped; the registry always
    assigns its own.
    """


class Employee(EmployeeBase):
    """Schema for an employee held by the registry."""

    id: int = Field(..., example=1)
