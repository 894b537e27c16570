from fastapi import APIRouter, Depends

from inventory.api.deps import get_current_identity, get_product_service
from inventory.api.schemas import CamelModel, MessageResponse, ProductResponse
from inventory.auth import Identity
from inventory.services.products import ProductService

router = APIRouter(tags=["products"])


class CreateProductRequest(CamelModel):
    name: str | None = None
    price: float | None = None
    quantity: int | None = None
    description: str | None = None


class UpdateProductRequest(CamelModel):
    name: str | None = None
    price: float | None = None
    quantity: int | None = None
    description: str | None = None


@router.get("/products", response_model=list[ProductResponse])
async def list_products(
    products: ProductService = Depends(get_product_service),
    _identity: Identity = Depends(get_current_identity),
):
    return products.list_products()


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int,
    products: ProductService = Depends(get_product_service),
):
    return products.get_product(product_id)


@router.post("/add-product", response_model=ProductResponse, status_code=201)
async def create_product(
    body: CreateProductRequest,
    products: ProductService = Depends(get_product_service),
):
    return products.create_product(
        body.name,
        body.price,
        body.quantity,
        body.description,
    )


@router.put("/products/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    body: UpdateProductRequest,
    products: ProductService = Depends(get_product_service),
):
    return products.update_product(product_id, body.model_dump(exclude_unset=True))


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int,
    products: ProductService = Depends(get_product_service),
):
    products.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully.")
