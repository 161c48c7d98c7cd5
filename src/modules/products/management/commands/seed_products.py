from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product

SEED_PRODUCTS = [
    ("Monitor Curvo de 49 Pulgadas", Decimal("300.00"), True),
    ("Monitor Plano de 23 Pulgadas", Decimal("180.00"), True),
    ("Audífonos Inalámbricos", Decimal("120.00"), True),
    ("Teclado Mecánico RGB", Decimal("95.50"), True),
    ("Mouse Ergonómico", Decimal("45.00"), False),
    ("Silla Gamer", Decimal("650.00"), True),
]


class Command(BaseCommand):
    help = "Seed database with demo products for development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for name, price, available in SEED_PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={"price": price, "available": available},
            )
            if was_created:
                created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, "
                f"skipped={len(SEED_PRODUCTS) - created}"
            )
        )
