"""Category models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel, func

__all__ = ["Category", "CategoryCreate", "CategoryPublic", "CategoryTree"]


class CategoryCreate(SQLModel):
    """Category creation model."""

    name: str = Field(
        min_length=1, max_length=100, description="Display name of the category"
    )

    parent_id: UUID | None = Field(
        default=None, description="Parent category, empty for a top-level category"
    )


class CategoryPublic(SQLModel):
    """Category model for detailed view."""

    id: UUID = Field(description="Unique identifier for the category")

    name: str = Field(description="Display name of the category")

    slug: str = Field(description="URL-safe unique name of the category")

    parent_id: UUID | None = Field(description="Parent category ID")

    level: int = Field(description="1 for top-level categories, 2 for children")

    created_at: datetime = Field(description="Timestamp when the category was created")


class CategoryTree(CategoryPublic):
    """Top-level category with its children."""

    children: list[CategoryPublic] = Field(
        default_factory=list, description="Child categories"
    )


class Category(SQLModel, table=True):
    """Category model."""

    __tablename__ = "category"

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        description="Unique identifier for the category.",
    )

    name: str = Field(description="Display name of the category.")

    slug: str = Field(
        index=True, unique=True, description="URL-safe unique name of the category."
    )

    parent_id: UUID | None = Field(
        default=None,
        foreign_key="category.id",
        index=True,
        description="Parent category ID.",
    )

    level: int = Field(default=1, description="Depth of the category in the tree.")

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), insert_default=func.now()),
        description="Timestamp when the category was created.",
    )

    updated_at: datetime = Field(
        sa_column=Column(
            DateTime(timezone=True), onupdate=func.now(), insert_default=func.now()
        ),
        description="Timestamp when the category was last updated.",
    )
