"""Pydantic request/response schemas for the Storefront API.

These are external contracts (anti-corruption layer) — separate from
internal Protean commands. Product fields are accepted as submitted strings;
their content rules are enforced by the domain so that every field error is
reported together.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    email: str = Field(..., max_length=254)
    name: str | None = Field(None, max_length=255)


class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Espresso Cup",
                    "description": "Porcelain cup, 80 ml.",
                    "price": "12.50",
                    "image_url": "images/1718000000000-espresso-cup.png",
                }
            ]
        }
    }

    name: str | None = None
    description: str | None = None
    price: str | None = None
    image_url: str | None = None


class AddToCartRequest(BaseModel):
    product_id: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class UserIdResponse(BaseModel):
    user_id: str


class ProductIdResponse(BaseModel):
    product_id: str


class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class ProductCardResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: str
    image_url: str


class PaginationResponse(BaseModel):
    current_page: int
    last_page: int
    total_items: int
    has_next_page: bool
    has_previous_page: bool
    next_page: int
    previous_page: int


class ProductListResponse(BaseModel):
    products: list[ProductCardResponse]
    pagination: PaginationResponse


class CartLineResponse(BaseModel):
    product_id: str
    quantity: int
    available: bool
    name: str | None = None
    description: str | None = None
    image_url: str | None = None
    price: str | None = None


class CartResponse(BaseModel):
    products: list[CartLineResponse]
    total: str


class OrderLineResponse(BaseModel):
    name: str
    quantity: int
    price: str


class OrderResponse(BaseModel):
    order_id: str
    placed_at: str | None = None
    products: list[OrderLineResponse]
    total: str


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
