"""Create flavorbase schema

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the catalogue tables: vendor, flavor, data_supplier,
       flavor_identifier, ingredient_category, ingredient, user_profile,
       user_flavor_note and preparation.
How:   Portable column types only, so the same revision runs on PostgreSQL
       and on SQLite.

Rollback: downgrade() drops every table (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── Flavor catalogue ──────────────────────────────────────────────────
    op.create_table(
        "vendor",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("code", sa.String(16), nullable=False, comment="Short vendor code, e.g. CAP"),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "flavor",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("vendor_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("density", sa.Numeric(5, 4), nullable=True, comment="Grams per millilitre"),
        sa.ForeignKeyConstraint(["vendor_id"], ["vendor.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_flavor_vendor_id", "flavor", ["vendor_id"])

    op.create_table(
        "data_supplier",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("code", sa.String(16), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "flavor_identifier",
        sa.Column("flavor_id", sa.Integer(), nullable=False),
        sa.Column("data_supplier_id", sa.Integer(), nullable=False),
        sa.Column("identifier", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["flavor_id"], ["flavor.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["data_supplier_id"], ["data_supplier.id"]),
        sa.PrimaryKeyConstraint("flavor_id", "data_supplier_id"),
    )

    # ── Ingredients ───────────────────────────────────────────────────────
    op.create_table(
        "ingredient_category",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("ordinal", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ingredient",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("ingredient_category_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("cas_number", sa.String(32), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("density", sa.Numeric(5, 4), nullable=True),
        sa.ForeignKeyConstraint(["ingredient_category_id"], ["ingredient_category.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_ingredient_category_id", "ingredient", ["ingredient_category_id"])

    # ── Users, notes and preparations ─────────────────────────────────────
    op.create_table(
        "user_profile",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "user_flavor_note",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("flavor_id", sa.Integer(), nullable=False),
        sa.Column("note", sa.Text(), nullable=False),
        sa.Column(
            "created",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["user_profile.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["flavor_id"], ["flavor.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "flavor_id"),
    )

    op.create_table(
        "preparation",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["user_profile.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop every table, children first."""
    op.drop_table("preparation")
    op.drop_table("user_flavor_note")
    op.drop_table("user_profile")
    op.drop_index("idx_ingredient_category_id", table_name="ingredient")
    op.drop_table("ingredient")
    op.drop_table("ingredient_category")
    op.drop_table("flavor_identifier")
    op.drop_table("data_supplier")
    op.drop_index("idx_flavor_vendor_id", table_name="flavor")
    op.drop_table("flavor")
    op.drop_table("vendor")
