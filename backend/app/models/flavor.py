"""
Flavorbase Backend: Flavor, Vendor and Data Supplier Models
=============================================================

What:  ORM models for the flavor catalogue and its external identifiers.
Who:   Queried through app.services.repository.Repository by the flavor routes.

Tables:
    vendor              A flavor manufacturer (e.g. CAP / Capella)
    flavor              A single flavor sold by one vendor
    data_supplier       An external catalogue that publishes flavor identifiers
    flavor_identifier   Composite-keyed link: (flavor_id, data_supplier_id) → identifier

Relationships are declared lazy="raise": related rows are only ever loaded
through an explicit `include` on the repository call (selectinload), never by
attribute access inside the async session.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Vendor(Base):
    """A flavor manufacturer, identified by a short unique code."""

    __tablename__ = "vendor"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Format: short uppercase vendor code, e.g. "CAP", "TPA", "FA"
    code: Mapped[str] = mapped_column(String(16), nullable=False, unique=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    flavors: Mapped[List["Flavor"]] = relationship(back_populates="vendor", lazy="raise")

    def __repr__(self) -> str:
        return f"<Vendor(id={self.id}, code='{self.code}')>"


class Flavor(Base):
    """
    A flavor concentrate sold by one Vendor.

    Query Patterns:
        - By id with vendor:  GET /flavor/{id}
        - Mutations by id:    POST / PUT / DELETE /flavor
    """

    __tablename__ = "flavor"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    vendor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vendor.id"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Format: URL-safe lowercase name, e.g. "pear" or "sweet-strawberry"
    slug: Mapped[str] = mapped_column(String(255), nullable=False)

    # Grams per millilitre; four decimal places of precision
    density: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4), nullable=True)

    vendor: Mapped["Vendor"] = relationship(back_populates="flavors", lazy="raise")

    __table_args__ = (
        Index("idx_flavor_vendor_id", "vendor_id"),
    )

    def __repr__(self) -> str:
        return f"<Flavor(id={self.id}, vendor_id={self.vendor_id}, slug='{self.slug}')>"


class DataSupplier(Base):
    """An external data source that assigns its own identifiers to flavors."""

    __tablename__ = "data_supplier"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)

    def __repr__(self) -> str:
        return f"<DataSupplier(id={self.id}, name='{self.name}')>"


class FlavorIdentifier(Base):
    """
    The identifier a DataSupplier uses for a Flavor.

    Primary key is the (flavor_id, data_supplier_id) pair: a supplier holds
    at most one identifier per flavor.
    """

    __tablename__ = "flavor_identifier"

    flavor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("flavor.id", ondelete="CASCADE"),
        primary_key=True,
    )
    data_supplier_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("data_supplier.id"),
        primary_key=True,
    )
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)

    flavor: Mapped["Flavor"] = relationship(lazy="raise")
    data_supplier: Mapped["DataSupplier"] = relationship(lazy="raise")

    def __repr__(self) -> str:
        return (
            f"<FlavorIdentifier(flavor_id={self.flavor_id}, "
            f"data_supplier_id={self.data_supplier_id})>"
        )
