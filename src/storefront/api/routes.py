"""FastAPI routes for the Storefront domain: catalogue, cart, orders and users."""

from dataclasses import asdict

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.api.dependencies import request_context
from storefront.api.schemas import (
    AddToCartRequest,
    CartLineResponse,
    CartResponse,
    OrderIdResponse,
    OrderLineResponse,
    OrderListResponse,
    OrderResponse,
    PaginationResponse,
    ProductCardResponse,
    ProductIdResponse,
    ProductListResponse,
    ProductRequest,
    RegisterUserRequest,
    StatusResponse,
    UserIdResponse,
)
from storefront.cart.items import AddToCart, RemoveFromCart, ResetCart
from storefront.cart.view import cart_for
from storefront.catalogue.administration import AddProduct, DeleteProduct, EditProduct, delete_product, edit_product
from storefront.catalogue.listing import ProductListing, list_products, product_details
from storefront.invoice.delivery import invoice_for
from storefront.order.checkout import Checkout
from storefront.order.queries import orders_for
from storefront.shared.context import RequestContext
from storefront.shared.money import format_minor_units
from storefront.user.registration import RegisterUser


def _listing_response(listing: ProductListing) -> ProductListResponse:
    page = listing.page
    return ProductListResponse(
        products=[ProductCardResponse(**asdict(card)) for card in listing.products],
        pagination=PaginationResponse(
            current_page=page.number,
            last_page=page.last_page,
            total_items=page.total,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
            next_page=page.next_page,
            previous_page=page.previous_page,
        ),
    )


def _rejected_submission(exc: ValidationError, body: ProductRequest) -> JSONResponse:
    """422 carrying the per-field errors and the values to re-display."""
    return JSONResponse(status_code=422, content={"errors": exc.messages, "values": body.model_dump()})


# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.post("", status_code=201, response_model=UserIdResponse)
async def register_user(body: RegisterUserRequest) -> UserIdResponse:
    command = RegisterUser(email=body.email, name=body.name)
    result = current_domain.process(command, asynchronous=False)
    return UserIdResponse(user_id=result)


# ---------------------------------------------------------------------------
# Public Catalogue Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListResponse)
async def get_product_list(page: str | None = None) -> ProductListResponse:
    return _listing_response(list_products(page))


@product_router.get("/{product_id}", response_model=ProductCardResponse)
async def get_product_details(product_id: str) -> ProductCardResponse:
    return ProductCardResponse(**asdict(product_details(product_id)))


# ---------------------------------------------------------------------------
# Admin Catalogue Router
# ---------------------------------------------------------------------------
admin_router = APIRouter(prefix="/admin/products", tags=["admin"])


@admin_router.get("", response_model=ProductListResponse)
async def get_admin_product_list(
    page: str | None = None, context: RequestContext = Depends(request_context)
) -> ProductListResponse:
    return _listing_response(list_products(page, admin_id=context.user_id))


@admin_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: ProductRequest, context: RequestContext = Depends(request_context)):
    try:
        command = AddProduct(
            admin_id=context.user_id,
            name=body.name,
            description=body.description,
            price=body.price,
            image_url=body.image_url,
        )
        result = current_domain.process(command, asynchronous=False)
    except ValidationError as exc:
        return _rejected_submission(exc, body)
    return ProductIdResponse(product_id=result)


@admin_router.put("/{product_id}", response_model=StatusResponse)
async def update_product(product_id: str, body: ProductRequest, context: RequestContext = Depends(request_context)):
    try:
        command = EditProduct(
            admin_id=context.user_id,
            product_id=product_id,
            name=body.name,
            description=body.description,
            price=body.price,
            image_url=body.image_url,
        )
        edit_product(command)
    except ValidationError as exc:
        return _rejected_submission(exc, body)
    return StatusResponse()


@admin_router.delete("/{product_id}")
async def remove_product(product_id: str, context: RequestContext = Depends(request_context)) -> JSONResponse:
    delete_product(DeleteProduct(admin_id=context.user_id, product_id=product_id))
    return JSONResponse(status_code=200, content={"message": "Success!"})


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart(context: RequestContext = Depends(request_context)) -> CartResponse:
    view = cart_for(context.user_id)
    return CartResponse(
        products=[CartLineResponse(**asdict(line)) for line in view.lines],
        total=view.total,
    )


@cart_router.post("/items", response_model=StatusResponse)
async def add_cart_item(body: AddToCartRequest, context: RequestContext = Depends(request_context)) -> StatusResponse:
    command = AddToCart(user_id=context.user_id, product_id=body.product_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("/items/{product_id}", response_model=StatusResponse)
async def remove_cart_item(product_id: str, context: RequestContext = Depends(request_context)) -> StatusResponse:
    command = RemoveFromCart(user_id=context.user_id, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@cart_router.delete("", response_model=StatusResponse)
async def reset_cart(context: RequestContext = Depends(request_context)) -> StatusResponse:
    current_domain.process(ResetCart(user_id=context.user_id), asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def checkout(context: RequestContext = Depends(request_context)) -> OrderIdResponse:
    result = current_domain.process(Checkout(user_id=context.user_id), asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=OrderListResponse)
async def get_orders(context: RequestContext = Depends(request_context)) -> OrderListResponse:
    return OrderListResponse(
        orders=[
            OrderResponse(
                order_id=str(order.id),
                placed_at=order.placed_at.isoformat() if order.placed_at else None,
                products=[
                    OrderLineResponse(
                        name=line.name,
                        quantity=line.quantity,
                        price=format_minor_units(line.unit_price),
                    )
                    for line in order.ordered_lines
                ],
                total=format_minor_units(order.total),
            )
            for order in orders_for(context.user_id)
        ]
    )


@order_router.get("/{order_id}/invoice")
async def get_invoice(order_id: str, context: RequestContext = Depends(request_context)) -> Response:
    filename, body = invoice_for(context.user_id, order_id)
    return Response(
        content=body,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f"inline; filename={filename}"},
    )
