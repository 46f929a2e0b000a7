from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from shop.application.shopping_service import ShoppingService
from shop.domain.cart.model import Cart
from shop.domain.customer.model import Customer
from shop.domain.errors import BuyError, ProductNotFoundError


router = APIRouter(prefix="/api/v1", tags=["shop"])


# === Request/Response Models ===

class ProductResponse(BaseModel):
    name: str
    count: int


class AddItemRequest(BaseModel):
    product_name: str
    quantity: int = Field(gt=0)


class CartItemResponse(BaseModel):
    name: str
    quantity: int


class CartResponse(BaseModel):
    customer_id: int
    items: list[CartItemResponse]
    item_count: int


class CheckoutResponse(BaseModel):
    purchased: bool


# === Dependency Injection ===

def get_shopping_service(request: Request) -> ShoppingService:
    """Get shopping service from app state"""
    return request.app.state.shopping_service


def _cart_response(cart: Cart) -> CartResponse:
    items = [
        CartItemResponse(name=product.name, quantity=quantity)
        for product, quantity in sorted(cart.get_products().items(), key=lambda i: i[0].name)
    ]
    return CartResponse(customer_id=cart.owner.id, items=items, item_count=cart.item_count)


# === Products ===

@router.get("/products", response_model=list[ProductResponse])
def get_products(service: ShoppingService = Depends(get_shopping_service)):
    """List all products with their stock"""
    return [ProductResponse(name=p.name, count=p.count) for p in service.get_all_products()]


@router.get("/products/{name}", response_model=ProductResponse)
def get_product(name: str, service: ShoppingService = Depends(get_shopping_service)):
    product = service.get_product_by_name(name)
    if product is None:
        raise HTTPException(404, "Product not found")
    return ProductResponse(name=product.name, count=product.count)


# === Cart ===

@router.get("/customers/{customer_id}/cart", response_model=CartResponse)
def view_cart(customer_id: int, service: ShoppingService = Depends(get_shopping_service)):
    cart = service.get_cart(Customer(id=customer_id))
    return _cart_response(cart)


@router.post("/customers/{customer_id}/cart/items", response_model=CartResponse)
def add_item(
    customer_id: int,
    payload: AddItemRequest,
    service: ShoppingService = Depends(get_shopping_service),
):
    """Add product to customer's cart. Stock is checked only at checkout."""
    try:
        cart = service.add_to_cart(Customer(id=customer_id), payload.product_name, payload.quantity)
    except ProductNotFoundError as e:
        raise HTTPException(404, detail=str(e))
    except ValueError as e:
        raise HTTPException(400, detail=str(e))
    return _cart_response(cart)


@router.post("/customers/{customer_id}/cart/checkout", response_model=CheckoutResponse)
def checkout(customer_id: int, service: ShoppingService = Depends(get_shopping_service)):
    """
    Buy everything in customer's cart.

    Returns purchased=false for an empty cart, 409 when stock is missing.
    """
    cart = service.get_cart(Customer(id=customer_id))
    try:
        purchased = service.buy(cart)
    except BuyError as e:
        raise HTTPException(409, detail=str(e))
    return CheckoutResponse(purchased=purchased)
