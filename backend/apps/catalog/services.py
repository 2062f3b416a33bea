from __future__ import annotations

from typing import Any, Dict, Optional, Union

from apps.common import get_logger
from apps.common.repository import Page
from .commands import CategoryCommand, ProductCommand
from .dtos import CategoryDTO, ProductDTO
from .exceptions import InvalidArgumentError, ResourceNotFoundError
from .mappers import CategoryMapper, ProductMapper
from .models import ID_MAX, Category, Product
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol

logger = get_logger(__name__).bind(component="catalog", layer="service")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _require_valid_id(entity_id: Optional[int], message: str) -> int:
    if entity_id is None or entity_id <= 0 or entity_id > ID_MAX:
        raise InvalidArgumentError(message, details={"id": entity_id})
    return entity_id


def _validate_page_request(page: int, size: int, max_size: Optional[int]) -> None:
    if page is None or page < 0:
        raise InvalidArgumentError(
            "Page index must not be less than zero", details={"page": page}
        )
    if size is None or size < 1:
        raise InvalidArgumentError(
            "Page size must not be less than one", details={"size": size}
        )
    if max_size is not None and size > max_size:
        raise InvalidArgumentError(
            f"Page size must not be greater than {max_size}",
            details={"size": size},
        )


class CategoryService:
    def __init__(
        self,
        categories: CategoryRepositoryProtocol,
        max_page_size: Optional[int] = None,
    ):
        self.categories = categories
        self.max_page_size = max_page_size
        self.logger = logger.bind(service="CategoryService")

    def list_categories(
        self, name: Optional[str], page: int, size: int
    ) -> Page[CategoryDTO]:
        _validate_page_request(page, size, self.max_page_size)
        self.logger.debug("Listing categories", name=name, page=page, size=size)
        if not _is_blank(name):
            result = self.categories.find_by_name_containing(name, page, size)
        else:
            result = self.categories.find_all(page, size)
        if result.is_empty:
            self.logger.info(
                "Category page empty", name=name, page=page, total=result.total
            )
            raise ResourceNotFoundError("No categories found.")
        return result.map(CategoryMapper.to_dto)

    def get_category(self, category_id: int) -> CategoryDTO:
        return CategoryMapper.to_dto(self._load_category(category_id))

    def create_category(
        self, data: Union[Dict[str, Any], CategoryCommand]
    ) -> CategoryDTO:
        cmd = data if isinstance(data, CategoryCommand) else CategoryCommand.from_raw(data)
        if _is_blank(cmd.name):
            raise InvalidArgumentError("Category name is required.")
        self.logger.info("Creating category", name=cmd.name)
        category = self.categories.save(Category(name=cmd.name))
        self.logger.info("Category created", category_id=category.id)
        return CategoryMapper.to_dto(category)

    def update_category(
        self, category_id: int, data: Union[Dict[str, Any], CategoryCommand]
    ) -> CategoryDTO:
        cmd = data if isinstance(data, CategoryCommand) else CategoryCommand.from_raw(data)
        category = self._load_category(category_id)
        if _is_blank(cmd.name):
            raise InvalidArgumentError("Category name is required.")
        self.logger.info("Updating category", category_id=category_id)
        category.name = cmd.name
        category = self.categories.save(category)
        self.logger.info("Category updated", category_id=category_id)
        return CategoryMapper.to_dto(category)

    def delete_category(self, category_id: int) -> None:
        _require_valid_id(category_id, "Invalid category ID.")
        if not self.categories.exists_by_id(category_id):
            self.logger.warning(
                "Category deletion failed: not found", category_id=category_id
            )
            raise ResourceNotFoundError(
                f"Category not found with ID: {category_id}",
                details={"id": str(category_id)},
            )
        # Products keep existing; the FK clears their category reference.
        self.categories.delete_by_id(category_id)
        self.logger.info("Category deleted", category_id=category_id)

    def _load_category(self, category_id: int) -> Category:
        _require_valid_id(category_id, "Invalid category ID.")
        self.logger.debug("Fetching category", category_id=category_id)
        category = self.categories.find_by_id(category_id)
        if category is None:
            self.logger.info("Category not found", category_id=category_id)
            raise ResourceNotFoundError(
                f"Category not found with ID: {category_id}",
                details={"id": str(category_id)},
            )
        return category


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
        max_page_size: Optional[int] = None,
    ):
        self.products = products
        self.categories = categories
        self.max_page_size = max_page_size
        self.logger = logger.bind(service="ProductService")

    def list_products(
        self, name: Optional[str], page: int, size: int
    ) -> Page[ProductDTO]:
        _validate_page_request(page, size, self.max_page_size)
        self.logger.debug("Listing products", name=name, page=page, size=size)
        if not _is_blank(name):
            result = self.products.find_by_name_containing(name, page, size)
        else:
            result = self.products.find_all(page, size)
        if result.is_empty:
            self.logger.info(
                "Product page empty", name=name, page=page, total=result.total
            )
            raise ResourceNotFoundError("No products found.")
        return result.map(ProductMapper.to_dto)

    def list_products_by_category(
        self, category_id: int, page: int, size: int
    ) -> Page[ProductDTO]:
        """Products bound to ``category_id``.

        An unknown category and a category without products both end in
        ``ResourceNotFoundError``; the category itself is not looked up.
        """
        _require_valid_id(category_id, "Invalid category ID.")
        _validate_page_request(page, size, self.max_page_size)
        self.logger.debug(
            "Listing products by category",
            category_id=category_id,
            page=page,
            size=size,
        )
        result = self.products.find_by_category_id(category_id, page, size)
        if result.is_empty:
            self.logger.info(
                "Category product page empty", category_id=category_id, page=page
            )
            raise ResourceNotFoundError(
                "No products found in the category.",
                details={"categoryId": str(category_id)},
            )
        return result.map(ProductMapper.to_dto)

    def get_product(self, product_id: int) -> ProductDTO:
        return ProductMapper.to_dto(self._load_product(product_id))

    def create_product(
        self, data: Union[Dict[str, Any], ProductCommand]
    ) -> ProductDTO:
        cmd = data if isinstance(data, ProductCommand) else ProductCommand.from_raw(data)
        category = self._resolve_category(cmd)
        self.logger.info("Creating product", name=cmd.name, category_id=category.id)
        product = Product(
            name=cmd.name,
            price=cmd.price,
            stock=cmd.stock,
            category=category,
        )
        product = self.products.save(product)
        self.logger.info("Product created", product_id=product.id)
        return ProductMapper.to_dto(product)

    def update_product(
        self, product_id: int, data: Union[Dict[str, Any], ProductCommand]
    ) -> ProductDTO:
        cmd = data if isinstance(data, ProductCommand) else ProductCommand.from_raw(data)
        product = self._load_product(product_id)
        category = self._resolve_category(cmd)
        self.logger.info(
            "Updating product", product_id=product_id, category_id=category.id
        )
        # Full overwrite: every mutable field is replaced, omitted ones included.
        product.name = cmd.name
        product.price = cmd.price
        product.stock = cmd.stock
        product.category = category
        product = self.products.save(product)
        self.logger.info("Product updated", product_id=product_id)
        return ProductMapper.to_dto(product)

    def delete_product(self, product_id: int) -> None:
        _require_valid_id(product_id, "Invalid product ID.")
        if not self.products.exists_by_id(product_id):
            self.logger.warning(
                "Product deletion failed: not found", product_id=product_id
            )
            raise ResourceNotFoundError(
                f"Product not found with ID: {product_id}",
                details={"id": str(product_id)},
            )
        self.products.delete_by_id(product_id)
        self.logger.info("Product deleted", product_id=product_id)

    def search_products(self, name: Optional[str], page: int, size: int) -> Page[ProductDTO]:
        if _is_blank(name):
            raise InvalidArgumentError("Product name is required for search.")
        _validate_page_request(page, size, self.max_page_size)
        self.logger.debug("Searching products", name=name, page=page, size=size)
        result = self.products.find_by_name_containing(name, page, size)
        if result.is_empty:
            self.logger.info("Product search returned nothing", name=name, page=page)
            raise ResourceNotFoundError(
                f"No products found with name: {name}", details={"name": name}
            )
        return result.map(ProductMapper.to_dto)

    def _load_product(self, product_id: int) -> Product:
        _require_valid_id(product_id, "Invalid product ID.")
        self.logger.debug("Fetching product", product_id=product_id)
        product = self.products.find_by_id(product_id)
        if product is None:
            self.logger.info("Product not found", product_id=product_id)
            raise ResourceNotFoundError(
                f"Product not found with ID: {product_id}",
                details={"id": str(product_id)},
            )
        return product

    def _resolve_category(self, cmd: ProductCommand) -> Category:
        if cmd.category_id is None or cmd.category_id <= 0:
            raise InvalidArgumentError(
                "Category ID must be provided.",
                details={"categoryId": cmd.category_id},
            )
        if _is_blank(cmd.name):
            raise InvalidArgumentError("Product name is required.")
        category = None
        if cmd.category_id <= ID_MAX:
            category = self.categories.find_by_id(cmd.category_id)
        if category is None:
            self.logger.warning(
                "Product write rejected: category not found",
                category_id=cmd.category_id,
            )
            raise ResourceNotFoundError(
                "Category not found", details={"categoryId": str(cmd.category_id)}
            )
        return category
