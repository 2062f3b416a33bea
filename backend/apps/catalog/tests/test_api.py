from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.catalog.models import Category, Product


class TestCategoryEndpoints(APITestCase):
    def setUp(self):
        self.list_url = reverse("api-categories-list")
        self.create_url = reverse("api-categories-create")
        self.detail_url = lambda cid: f"/api/v1/category/{cid}"

    def test_create_get_update_delete_category(self):
        created = self.client.post(
            self.create_url, {"id": 500, "name": "Electronics"}, format="json"
        )
        self.assertEqual(created.status_code, status.HTTP_201_CREATED)
        cid = created.data["id"]
        self.assertNotEqual(cid, 500)
        self.assertGreater(cid, 0)

        fetched = self.client.get(self.detail_url(cid))
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data, {"id": cid, "name": "Electronics"})

        updated = self.client.put(self.detail_url(cid), {"name": "Gadgets"}, format="json")
        self.assertEqual(updated.status_code, status.HTTP_200_OK)
        self.assertEqual(Category.objects.get(pk=cid).name, "Gadgets")

        deleted = self.client.delete(self.detail_url(cid))
        self.assertEqual(deleted.status_code, status.HTTP_204_NO_CONTENT)
        self.assertEqual(deleted.content, b"")
        self.assertFalse(Category.objects.filter(pk=cid).exists())

        missing = self.client.get(self.detail_url(cid))
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(missing.data["error"]["code"], "NOT_FOUND")
        self.assertEqual(
            missing.data["error"]["message"], f"Category not found with ID: {cid}"
        )

    def test_invalid_ids_are_rejected(self):
        for cid in (0, -1):
            with self.subTest(cid=cid):
                response = self.client.get(self.detail_url(cid))
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"]["code"], "INVALID_ARGUMENT")
                self.assertEqual(
                    response.data["error"]["message"], "Invalid category ID."
                )

    def test_create_blank_name_is_rejected(self):
        response = self.client.post(self.create_url, {"name": "   "}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["message"], "Category name is required.")
        self.assertEqual(Category.objects.count(), 0)

    def test_list_requires_page_and_size(self):
        Category.objects.create(name="Books")
        response = self.client.get(self.list_url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")

    def test_list_paginates_and_filters(self):
        for name in ("Home Audio", "Books", "Car Audio", "Audio Cables"):
            Category.objects.create(name=name)
        response = self.client.get(self.list_url, {"name": "audio", "page": 1, "size": 2})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 3)
        self.assertEqual(response.data["page"], 1)
        self.assertEqual(response.data["totalPages"], 2)
        self.assertEqual([c["name"] for c in response.data["results"]], ["Audio Cables"])
        self.assertIsNone(response.data["next"])
        self.assertIn("page=0", response.data["previous"])

    def test_list_out_of_range_page_is_not_found(self):
        Category.objects.create(name="Books")
        response = self.client.get(self.list_url, {"page": 4, "size": 10})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["message"], "No categories found.")

    def test_delete_category_with_products_keeps_products(self):
        category = Category.objects.create(name="Books")
        product = Product.objects.create(name="Novel", price=9.5, stock=1, category=category)
        response = self.client.delete(self.detail_url(category.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        product.refresh_from_db()
        self.assertIsNone(product.category_id)
        fetched = self.client.get(f"/api/v1/product/{product.id}")
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertIsNone(fetched.data["categoryId"])


class TestProductEndpoints(APITestCase):
    def setUp(self):
        self.books = Category.objects.create(name="Books")
        self.games = Category.objects.create(name="Games")
        self.list_url = reverse("api-products-list")
        self.search_url = reverse("api-products-search")
        self.create_url = reverse("api-products-create")
        self.detail_url = lambda pid: f"/api/v1/product/{pid}"

    def _create(self, name, category, price=10.0, stock=1):
        return Product.objects.create(name=name, price=price, stock=stock, category=category)

    def test_create_product(self):
        response = self.client.post(
            self.create_url,
            {"id": 99, "name": "Novel", "price": 12.5, "stock": 3, "categoryId": self.books.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["name"], "Novel")
        self.assertEqual(response.data["categoryId"], self.books.id)
        self.assertNotEqual(response.data["id"], 99)
        self.assertTrue(Product.objects.filter(pk=response.data["id"]).exists())

    def test_create_with_unknown_category_writes_nothing(self):
        response = self.client.post(
            self.create_url,
            {"name": "Orphan", "price": 1.0, "stock": 1, "categoryId": 12345},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["message"], "Category not found")
        self.assertEqual(Product.objects.count(), 0)

    def test_create_without_category_is_invalid(self):
        response = self.client.post(
            self.create_url, {"name": "Loose", "price": 1.0, "stock": 1}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "INVALID_ARGUMENT")
        self.assertEqual(response.data["error"]["message"], "Category ID must be provided.")

    def test_update_overwrites_all_fields(self):
        product = self._create("Old", self.books, price=1.0, stock=50)
        response = self.client.put(
            self.detail_url(product.id),
            {"name": "X", "price": 9.99, "stock": 5, "categoryId": self.games.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        fetched = self.client.get(self.detail_url(product.id))
        self.assertEqual(
            fetched.data,
            {"id": product.id, "name": "X", "price": 9.99, "stock": 5, "categoryId": self.games.id},
        )

    def test_update_partial_body_clears_omitted_fields(self):
        product = self._create("Old", self.books, price=20.0, stock=8)
        response = self.client.put(
            self.detail_url(product.id),
            {"name": "Renamed", "categoryId": self.books.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        product.refresh_from_db()
        self.assertIsNone(product.price)
        self.assertEqual(product.stock, 0)

    def test_get_and_delete_missing_product(self):
        self.assertEqual(self.client.get(self.detail_url(777)).status_code, 404)
        self.assertEqual(self.client.delete(self.detail_url(777)).status_code, 404)
        self.assertEqual(self.client.delete(self.detail_url(-2)).status_code, 400)

    def test_delete_product(self):
        product = self._create("Bye", self.books)
        response = self.client.delete(self.detail_url(product.id))
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(pk=product.id).exists())

    def test_list_defaults_and_blank_filter(self):
        for idx in range(12):
            self._create(f"Item {idx:02d}", self.books)
        response = self.client.get(self.list_url, {"name": ""})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["size"], 10)
        self.assertEqual(len(response.data["results"]), 10)
        self.assertEqual(response.data["count"], 12)
        self.assertIn("page=1", response.data["next"])

    def test_list_no_match_is_not_found(self):
        self._create("Chess", self.games)
        response = self.client.get(self.list_url, {"name": "zzz-no-match", "page": 0, "size": 10})
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"]["message"], "No products found.")

    def test_list_rejects_oversized_page(self):
        self._create("Chess", self.games)
        response = self.client.get(self.list_url, {"size": 1000})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "INVALID_ARGUMENT")

    def test_search_is_case_insensitive_and_requires_name(self):
        self._create("Chess Board", self.games)
        self._create("Novel", self.books)
        found = self.client.get(self.search_url, {"name": "CHESS"})
        self.assertEqual(found.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in found.data["results"]], ["Chess Board"])

        blank = self.client.get(self.search_url, {"name": ""})
        self.assertEqual(blank.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            blank.data["error"]["message"], "Product name is required for search."
        )

        none = self.client.get(self.search_url, {"name": "poker"})
        self.assertEqual(none.status_code, status.HTTP_404_NOT_FOUND)

    def test_products_by_category(self):
        self._create("Novel", self.books)
        self._create("Dice", self.games)
        response = self.client.get(f"/api/v1/category/{self.games.id}/products")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in response.data["results"]], ["Dice"])
        empty = Category.objects.create(name="Empty")
        self.assertEqual(
            self.client.get(f"/api/v1/category/{empty.id}/products").status_code, 404
        )


class TestWriteBodyBounds(APITestCase):
    def setUp(self):
        self.category = Category.objects.create(name="Books")

    def test_out_of_range_stock_is_rejected(self):
        for stock in (10 ** 20, -(2 ** 31) - 1):
            with self.subTest(stock=stock):
                response = self.client.post(
                    "/api/v1/product",
                    {"name": "X", "price": 1.0, "stock": stock, "categoryId": self.category.id},
                    format="json",
                )
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
                self.assertIn("stock", response.data["error"]["details"])
        self.assertEqual(Product.objects.count(), 0)

    def test_stock_at_column_limit_is_stored(self):
        response = self.client.post(
            "/api/v1/product",
            {"name": "X", "stock": 2 ** 31 - 1, "categoryId": self.category.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["stock"], 2 ** 31 - 1)

    def test_null_stock_behaves_like_omitted(self):
        response = self.client.post(
            "/api/v1/product",
            {"name": "X", "price": 1.0, "stock": None, "categoryId": self.category.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["stock"], 0)

    def test_over_long_category_name_is_rejected(self):
        response = self.client.post("/api/v1/category", {"name": "a" * 256}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        self.assertIn("name", response.data["error"]["details"])
        self.assertEqual(Category.objects.count(), 1)

    def test_category_name_at_limit_is_accepted(self):
        response = self.client.post("/api/v1/category", {"name": "a" * 255}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_over_long_product_name_is_rejected(self):
        response = self.client.post(
            "/api/v1/product",
            {"name": "p" * 300, "categoryId": self.category.id},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data["error"]["details"])

    def test_huge_category_id_is_rejected(self):
        response = self.client.post(
            "/api/v1/product", {"name": "X", "categoryId": 10 ** 30}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")

    def test_huge_path_id_is_invalid(self):
        response = self.client.get(f"/api/v1/product/{10 ** 30}")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["message"], "Invalid product ID.")
