"""CCNL schemas."""

from pydantic import BaseModel, Field


class SalaryTableIn(BaseModel):
    level: str = Field(min_length=1, max_length=50)
    is_apprentice: bool = False
    base_salary: float = Field(default=0, ge=0)
    contingency: float = Field(default=0, ge=0)
    third_element: float = Field(default=0, ge=0)
    seniority: float = Field(default=0, ge=0)
    hh: int = Field(default=0, ge=0)
    gg: int = Field(default=0, ge=0)


class CCNLCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    code: str | None = Field(default=None, max_length=50)
    salary_table: list[SalaryTableIn] = Field(default_factory=list)


class SalaryTableRead(SalaryTableIn):
    id: int
    ccnl_id: int | None

    model_config = {"from_attributes": True}


class CCNLRead(BaseModel):
    id: int
    name: str
    code: str | None

    model_config = {"from_attributes": True}


class CCNLWithSalaryTableRead(CCNLRead):
    salary_table: list[SalaryTableRead]
