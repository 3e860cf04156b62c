"""
Flavorbase Backend: Ingredient Models
=======================================

What:  ORM models for base ingredients and the categories that group them.
Who:   Queried by the ingredient, ingredients and ingredientCategories routes.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class IngredientCategory(Base):
    """A grouping of ingredients (e.g. "Base", "Nicotine", "Additive")."""

    __tablename__ = "ingredient_category"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Display position within category pickers
    ordinal: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    ingredients: Mapped[List["Ingredient"]] = relationship(
        back_populates="ingredient_category", lazy="raise"
    )

    def __repr__(self) -> str:
        return f"<IngredientCategory(id={self.id}, name='{self.name}')>"


class Ingredient(Base):
    """A single ingredient belonging to one IngredientCategory."""

    __tablename__ = "ingredient"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    ingredient_category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ingredient_category.id"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Chemical Abstracts Service registry number, e.g. "57-55-6"
    cas_number: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    density: Mapped[Optional[Decimal]] = mapped_column(Numeric(5, 4), nullable=True)

    ingredient_category: Mapped["IngredientCategory"] = relationship(
        back_populates="ingredients", lazy="raise"
    )

    __table_args__ = (
        Index("idx_ingredient_category_id", "ingredient_category_id"),
    )

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, name='{self.name}')>"
