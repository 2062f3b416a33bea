from django.db import models

NAME_MAX_LENGTH = 255
# Bounds of the 32-bit integer column behind Product.stock
STOCK_MIN = -(2 ** 31)
STOCK_MAX = 2 ** 31 - 1
# Largest primary key a BigAutoField can hold
ID_MAX = 2 ** 63 - 1


class Category(models.Model):
    name = models.CharField(max_length=NAME_MAX_LENGTH)

    class Meta:
        db_table = "categories"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="category_name_idx"),
        ]

    def __str__(self):
        return self.name


class Product(models.Model):
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    # Nullable: a full-overwrite update without a price clears it.
    price = models.FloatField(null=True, blank=True)
    stock = models.IntegerField(default=0)
    # Deleting a category keeps its products and clears the reference.
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["name"], name="product_name_idx"),
        ]

    def __str__(self):
        return self.name
