"""
Pydantic schemas for product requests and responses
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime

from storefront.models.enums import ProductCategory


class ProductBase(BaseModel):
    """Base Product schema with common fields"""
    product_name: str = Field(..., min_length=3, max_length=100, description="Product name")
    price: float = Field(..., gt=0, description="Product price (must be positive)")
    category: ProductCategory = Field(..., description="Product category")
    product_desc: Optional[str] = Field(None, max_length=250, description="Product description")
    image_name: str = Field(..., min_length=1, max_length=255, description="Image file name")
    product_features: Optional[List[str]] = None
    product_accessories: Optional[List[str]] = None
    is_new: bool = True


class ProductCreate(ProductBase):
    """Schema for creating a new product"""
    id: str = Field(..., min_length=3, max_length=50, description="Product slug, e.g. xx99-mark-two")


class ProductUpdate(BaseModel):
    """Schema for updating a product (all fields optional)"""
    product_name: Optional[str] = Field(None, min_length=3, max_length=100)
    price: Optional[float] = Field(None, gt=0)
    category: Optional[ProductCategory] = None
    product_desc: Optional[str] = Field(None, max_length=250)
    image_name: Optional[str] = Field(None, min_length=1, max_length=255)
    product_features: Optional[List[str]] = None
    product_accessories: Optional[List[str]] = None
    is_new: Optional[bool] = None


class ProductResponse(ProductBase):
    """Schema for product response"""
    id: str
    created_at: datetime
    updated_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Schema for list of products response"""
    products: List[ProductResponse]
    total: int


class ProductData(BaseModel):
    product: ProductResponse


class ProductEnvelope(BaseModel):
    status: str = "success"
    data: ProductData


class ProductListEnvelope(BaseModel):
    status: str = "success"
    results: int
    data: ProductListResponse
