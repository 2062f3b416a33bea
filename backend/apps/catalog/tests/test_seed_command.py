from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from apps.catalog.models import Category, Product


class SeedCatalogCommandTests(TestCase):
    def test_seed_creates_categories_and_products(self):
        out = StringIO()
        call_command("seed_catalog", stdout=out)
        self.assertEqual(Category.objects.count(), 4)
        self.assertEqual(Product.objects.count(), 10)
        self.assertIn("Catalog seeded", out.getvalue())
        mouse = Product.objects.get(name="Wireless Mouse")
        self.assertEqual(mouse.category.name, "Electronics")

    def test_seed_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        call_command("seed_catalog", stdout=StringIO())
        self.assertEqual(Category.objects.count(), 4)
        self.assertEqual(Product.objects.count(), 10)

    def test_flush_removes_unrelated_rows(self):
        Category.objects.create(name="Temporary")
        call_command("seed_catalog", "--flush", stdout=StringIO())
        self.assertFalse(Category.objects.filter(name="Temporary").exists())
        self.assertEqual(Category.objects.count(), 4)

    def test_duplicate_category_names_are_reused(self):
        first = Category.objects.create(name="Books")
        Category.objects.create(name="Books")
        call_command("seed_catalog", stdout=StringIO())
        self.assertEqual(Category.objects.filter(name="Books").count(), 2)
        novel = Product.objects.get(name="Clean Architecture")
        self.assertEqual(novel.category_id, first.id)
