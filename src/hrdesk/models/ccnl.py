"""Collective labour agreements (CCNL) and their salary scales.

Shared reference data: these tables carry no tenant column.
"""

from sqlmodel import Field, Relationship, SQLModel


class CCNL(SQLModel, table=True):
    __tablename__ = "ccnl"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, index=True)
    code: str | None = Field(default=None, max_length=50)

    salary_table: list["SalaryTable"] = Relationship(
        back_populates="ccnl",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "SalaryTable.id",
        },
    )


class SalaryTable(SQLModel, table=True):
    """One level of a CCNL salary scale. Amounts are monthly."""

    __tablename__ = "salary_tables"

    id: int | None = Field(default=None, primary_key=True)
    ccnl_id: int | None = Field(default=None, foreign_key="ccnl.id", index=True, ondelete="CASCADE")
    level: str = Field(max_length=50)
    is_apprentice: bool = Field(default=False)
    base_salary: float = Field(default=0)
    contingency: float = Field(default=0)
    third_element: float = Field(default=0)
    seniority: float = Field(default=0)
    hh: int = Field(default=0)  # weekly hours
    gg: int = Field(default=0)  # working days

    ccnl: CCNL | None = Relationship(back_populates="salary_table")
