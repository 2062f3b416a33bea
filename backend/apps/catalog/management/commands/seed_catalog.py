from django.core.management.base import BaseCommand
from django.db import transaction, connection
from django.core.management.color import no_style
from apps.catalog.models import Category, Product

CATEGORIES = [
    "Electronics",
    "Books",
    "Home & Kitchen",
    "Sports",
]

# (name, price, stock, category name)
PRODUCTS = [
    ("Wireless Mouse", 24.99, 150, "Electronics"),
    ("Mechanical Keyboard", 89.90, 60, "Electronics"),
    ("USB-C Charger 65W", 39.50, 200, "Electronics"),
    ("Noise Cancelling Headphones", 199.00, 35, "Electronics"),
    ("The Pragmatic Programmer", 42.00, 80, "Books"),
    ("Clean Architecture", 35.75, 45, "Books"),
    ("Cast Iron Skillet", 29.99, 70, "Home & Kitchen"),
    ("French Press", 19.95, 90, "Home & Kitchen"),
    ("Yoga Mat", 25.00, 120, "Sports"),
    ("Adjustable Dumbbells", 149.99, 20, "Sports"),
]


class Command(BaseCommand):
    help = "Seed demo categories and products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing catalog data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["flush"]:
            self.stdout.write("Flushing existing catalog data...")
            Product.objects.all().delete()
            Category.objects.all().delete()
            self._reset_sequences([Category, Product])

        self.stdout.write("Seeding categories...")
        name_to_cat = {}
        for name in CATEGORIES:
            # names are not unique; reuse the oldest match
            cat = Category.objects.filter(name=name).order_by("id").first()
            if cat is None:
                cat = Category.objects.create(name=name)
            name_to_cat[name] = cat

        self.stdout.write("Seeding products...")
        created = 0
        for name, price, stock, cat_name in PRODUCTS:
            if Product.objects.filter(name=name).exists():
                continue
            Product.objects.create(
                name=name, price=price, stock=stock, category=name_to_cat[cat_name]
            )
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Catalog seeded: {len(name_to_cat)} categories, {created} new products."
            )
        )

    @staticmethod
    def _reset_sequences(models):
        """Reset primary key sequences so seeded ids start at 1 (PostgreSQL, etc.)."""
        sql_list = connection.ops.sequence_reset_sql(no_style(), models)
        if not sql_list:
            return
        with connection.cursor() as cursor:
            for sql in sql_list:
                cursor.execute(sql)
