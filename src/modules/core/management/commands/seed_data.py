from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.accounts.models import User
from modules.core.context import RequestContext
from modules.orders.dtos import PlaceOrderDTO
from modules.orders.models import Order
from modules.orders.repository import OrderRepository
from modules.orders.services import OrderService
from modules.products.exceptions import InsufficientStock
from modules.products.models import Product
from modules.products.repository import ProductRepository

DEFAULT_PASSWORD = "password"

SEED_USERS = [
    ("Ana Souza", "ana@example.com"),
    ("Bruno Lima", "bruno@example.com"),
    ("Carla Mendes", "carla@example.com"),
    ("Daniel Costa", "daniel@example.com"),
    ("Eduardo Alves", "eduardo@example.com"),
    ("Fernanda Rocha", "fernanda@example.com"),
    ("Gabriel Santos", "gabriel@example.com"),
    ("Helena Ferreira", "helena@example.com"),
    ("Igor Ramos", "igor@example.com"),
]

CATALOG = [
    ("Monitor 27\"", "Electronics", Decimal("1299.90")),
    ("Mechanical Keyboard", "Electronics", Decimal("399.90")),
    ("Gaming Mouse", "Electronics", Decimal("249.90")),
    ("Notebook 14\"", "Electronics", Decimal("3999.00")),
    ("Headset", "Electronics", Decimal("299.90")),
    ("Office Desk", "Furniture", Decimal("899.00")),
    ("Ergonomic Chair", "Furniture", Decimal("1499.00")),
    ("Bookshelf", "Furniture", Decimal("699.00")),
    ("A4 Paper", "Office", Decimal("29.90")),
    ("Blue Pen", "Office", Decimal("4.90")),
    ("Notebook Stand", "Office", Decimal("149.90")),
    ("Calculator", "Office", Decimal("89.90")),
]


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=30,
            help="Number of orders to place when the orders table is empty.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users = self._seed_users()
        products = self._seed_products()
        orders_created = self._seed_orders(users, products, options["orders"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={len(users) + 1}, "
                f"products={len(products)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_users(self) -> list[User]:
        self.stdout.write("Creating users...")
        users: list[User] = []
        for name, email in SEED_USERS:
            user = User.objects.filter(email=email).first()
            if user is None:
                user = User.objects.create_user(
                    email=email, password=DEFAULT_PASSWORD, name=name
                )
            users.append(user)

        if not User.objects.filter(email="admin@example.com").exists():
            User.objects.create_superuser(
                email="admin@example.com",
                password=DEFAULT_PASSWORD,
                name="Admin User",
            )
        self.stdout.write(self.style.SUCCESS("Creating users... Done!"))
        return users

    def _seed_products(self) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        for name, category, price in CATALOG:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "description": category,
                    "price": price,
                    "stock": random.randint(10, 200),
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_orders(
        self, users: list[User], products: list[Product], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        service = OrderService(
            order_repository=OrderRepository(),
            product_repository=ProductRepository(),
        )
        created = 0
        for _ in range(count):
            user = random.choice(users)
            product = random.choice(products)
            try:
                service.create_order(
                    RequestContext(actor_id=user.pk, role=user.role),
                    PlaceOrderDTO(product_id=product.pk, quantity=random.randint(1, 5)),
                )
            except InsufficientStock:
                continue
            created += 1

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return created
