"""Initial migration

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # 1. Tenants
    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tenants_name", "tenants", ["name"], unique=False)

    # 2. Users (unique email per tenant)
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column("full_name", sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),
    )
    op.create_index("ix_users_tenant_id", "users", ["tenant_id"], unique=False)
    op.create_index("ix_users_email", "users", ["email"], unique=False)

    # 3. Companies
    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("fiscal_code", sqlmodel.sql.sqltypes.AutoString(length=16), nullable=True),
        sa.Column("iva_code", sqlmodel.sql.sqltypes.AutoString(length=11), nullable=True),
        sa.Column(
            "inps_registration_number", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True
        ),
        sa.Column(
            "inail_registration_number", sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True
        ),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_companies_tenant_id", "companies", ["tenant_id"], unique=False)
    op.create_index("ix_companies_name", "companies", ["name"], unique=False)

    # 4. Company bases - deleted with their company
    op.create_table(
        "company_bases",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=True),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("address", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_company_bases_tenant_id", "company_bases", ["tenant_id"], unique=False)
    op.create_index("ix_company_bases_company_id", "company_bases", ["company_id"], unique=False)

    # 5. Persons - released when their base goes away
    op.create_table(
        "persons",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("tenant_id", sa.Uuid(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("address", sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column("phone", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column("company_base_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["company_base_id"], ["company_bases.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_persons_tenant_id", "persons", ["tenant_id"], unique=False)
    op.create_index("ix_persons_name", "persons", ["name"], unique=False)
    op.create_index("ix_persons_company_base_id", "persons", ["company_base_id"], unique=False)

    # 6. CCNL reference data (shared, no tenant column)
    op.create_table(
        "ccnl",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("code", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ccnl_name", "ccnl", ["name"], unique=False)

    op.create_table(
        "salary_tables",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("ccnl_id", sa.Integer(), nullable=True),
        sa.Column("level", sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column("is_apprentice", sa.Boolean(), nullable=False),
        sa.Column("base_salary", sa.Float(), nullable=False),
        sa.Column("contingency", sa.Float(), nullable=False),
        sa.Column("third_element", sa.Float(), nullable=False),
        sa.Column("seniority", sa.Float(), nullable=False),
        sa.Column("hh", sa.Integer(), nullable=False),
        sa.Column("gg", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["ccnl_id"], ["ccnl.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_salary_tables_ccnl_id", "salary_tables", ["ccnl_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_salary_tables_ccnl_id", table_name="salary_tables")
    op.drop_table("salary_tables")
    op.drop_index("ix_ccnl_name", table_name="ccnl")
    op.drop_table("ccnl")
    op.drop_index("ix_persons_company_base_id", table_name="persons")
    op.drop_index("ix_persons_name", table_name="persons")
    op.drop_index("ix_persons_tenant_id", table_name="persons")
    op.drop_table("persons")
    op.drop_index("ix_company_bases_company_id", table_name="company_bases")
    op.drop_index("ix_company_bases_tenant_id", table_name="company_bases")
    op.drop_table("company_bases")
    op.drop_index("ix_companies_name", table_name="companies")
    op.drop_index("ix_companies_tenant_id", table_name="companies")
    op.drop_table("companies")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_index("ix_users_tenant_id", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_tenants_name", table_name="tenants")
    op.drop_table("tenants")
