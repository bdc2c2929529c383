# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the product contract:
# - Product: A persisted row from the Product table
# - ProductList: Listing response with a count
# - ImageFile: The uploaded image blob, alive only for one create request
#
# Column names in the database follow the camelCase conceptual schema
# (clerkId, createdAt). Python code uses snake_case; the aliases keep the
# wire format and the table layout in sync.
# =============================================================================

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    A sellable item as stored in the database.

    Returned by:
    - GET /products (listing and search)
    - GET /products/featured
    - GET /products/{id}

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "Desk Lamp",
            "company": "Acme",
            "price": 1999,
            "description": "A sturdy lamp ...",
            "image": "https://xxx.supabase.co/storage/v1/object/public/main-bucket/1718000000000-lamp.jpg",
            "featured": true,
            "clerkId": "user_123",
            "createdAt": "2024-06-10T10:30:00Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Assigned by the database on insert
    id: str = Field(
        ...,
        description="Unique product identifier"
    )

    name: str = Field(
        ...,
        description="Display name (3-100 characters)"
    )

    company: str = Field(
        ...,
        description="Manufacturer or brand"
    )

    # Smallest currency unit (cents), never negative
    price: int = Field(
        ...,
        ge=0,
        description="Price in the smallest currency unit"
    )

    description: str = Field(
        ...,
        description="Long-form description (10-1000 words)"
    )

    # Public URL of the uploaded image
    image: str = Field(
        ...,
        description="Public image URL"
    )

    featured: bool = Field(
        default=False,
        description="Shown on the home page when true"
    )

    # The authenticated user who created the product
    clerk_id: str = Field(
        ...,
        alias="clerkId",
        description="Owning user identifier"
    )

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Timestamp when product was created"
    )

    updated_at: datetime | None = Field(
        default=None,
        alias="updatedAt",
        description="Timestamp of the last update"
    )


class ProductList(BaseModel):
    """
    Schema for listing products.

    Example:
        {
            "products": [...],
            "total": 12,
            "search": "lamp"
        }
    """

    products: list[Product] = Field(
        default_factory=list,
        description="Matching products, newest first"
    )

    total: int = Field(
        default=0,
        ge=0,
        description="Number of products returned"
    )

    search: str = Field(
        default="",
        description="Search term that produced this list"
    )


@dataclass(frozen=True)
class ImageFile:
    """
    An uploaded image before it reaches storage.

    Built from the multipart upload at the HTTP boundary. The bytes are
    dropped once the storage URL is known.
    """
    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)
