from .dtos import ProductDTO, CategoryDTO
from .models import Product, Category


class CategoryMapper:
    @staticmethod
    def to_dto(cat: Category) -> CategoryDTO:
        return CategoryDTO(id=cat.id, name=cat.name)


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        # Flatten the owning category to its id; it is None once the category is deleted.
        category = getattr(product, "category", None)
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price,
            stock=product.stock,
            category_id=category.id if category is not None else None,
        )
