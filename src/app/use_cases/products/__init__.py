"""Product catalog use cases"""
from .create_product import CreateProduct
from .update_product import UpdateProduct
from .delete_product import DeleteProduct
from .get_product import GetProduct
from .list_products import ListProducts
from .search_products import SearchProducts
from .generate_sku import GenerateSku
from .dtos import (
    CreateProductCommandDTO,
    UpdateProductCommandDTO,
    ProductResponseDTO,
    SkuResponseDTO,
)

__all__ = [
    "CreateProduct",
    "UpdateProduct",
    "DeleteProduct",
    "GetProduct",
    "ListProducts",
    "SearchProducts",
    "GenerateSku",
    "CreateProductCommandDTO",
    "UpdateProductCommandDTO",
    "ProductResponseDTO",
    "SkuResponseDTO",
]
