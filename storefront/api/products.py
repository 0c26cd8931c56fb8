"""
Product API endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.database import get_db
from storefront.exceptions import NotFoundError
from storefront.models.enums import ProductCategory
from storefront.models.user import User
from storefront.services.product_service import ProductService
from storefront.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductData,
    ProductEnvelope,
    ProductListResponse,
    ProductListEnvelope
)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=ProductListEnvelope, summary="Get all products")
def get_products(
    skip: int = Query(0, ge=0, description="Number of products to skip"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of products to return"),
    category: Optional[ProductCategory] = Query(None, description="Only products in this category"),
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve products ordered by name, with pagination

    - **skip**: Number of products to skip (default: 0)
    - **limit**: Maximum number of products to return (default: 100, max: 1000)
    - **category**: headphones, speakers or earphones
    """
    listing = service.get_all_products(skip=skip, limit=limit, category=category)
    return ProductListEnvelope(results=len(listing.products), data=listing)


@router.get("/featured", response_model=ProductListEnvelope, summary="Get featured products")
def get_featured_products(service: ProductService = Depends(get_product_service)):
    """
    Retrieve products flagged as new
    """
    featured = service.get_featured_products()
    return ProductListEnvelope(
        results=len(featured),
        data=ProductListResponse(products=featured, total=len(featured))
    )


@router.get("/{product_id}", response_model=ProductEnvelope, summary="Get product by ID")
def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve a specific product by ID
    """
    product = service.get_product_by_id(product_id)
    if not product:
        raise NotFoundError(f"Product with id={product_id} not found")
    return ProductEnvelope(data=ProductData(product=product))


@router.post("", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED, summary="Create product")
def create_product(
    product_data: ProductCreate,
    admin: User = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product (administrators only)
    """
    return ProductEnvelope(data=ProductData(product=service.create_product(product_data)))


@router.put("/{product_id}", response_model=ProductEnvelope, summary="Update product")
def update_product(
    product_id: str,
    product_data: ProductUpdate,
    admin: User = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product (administrators only)

    All fields are optional. Only provided fields will be updated.
    """
    product = service.update_product(product_id, product_data)
    if not product:
        raise NotFoundError(f"Product with id={product_id} not found")
    return ProductEnvelope(data=ProductData(product=product))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete product")
def delete_product(
    product_id: str,
    admin: User = Depends(require_admin),
    service: ProductService = Depends(get_product_service)
):
    """
    Delete a product (administrators only)
    """
    if not service.delete_product(product_id):
        raise NotFoundError(f"Product with id={product_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
