from __future__ import annotations

import random

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.core.security import hash_password
from modules.products.models import Product
from modules.update_points.models import UpdatePoint
from modules.updates.constants import UpdateStatus
from modules.updates.models import Update
from modules.users.models import User

SEED_USERS = [
    ("alice", "Alice123"),
    ("bruno", "Bruno123"),
]

SEED_PRODUCTS = [
    ("Tracker Web", 4900),
    ("Tracker Mobile", 2900),
    ("Tracker CLI", 900),
]


class Command(BaseCommand):
    help = "Seed database with development users, products, updates and points."

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users = self._seed_users()
        products = self._seed_products(users)
        updates = self._seed_updates(products)
        points = self._seed_points(updates)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={len(users)}, "
                f"products={len(products)}, "
                f"updates={len(updates)}, "
                f"points={points}"
            )
        )

    def _seed_users(self) -> list[User]:
        users: list[User] = []
        for username, password in SEED_USERS:
            user, _ = User.objects.get_or_create(
                username=username,
                defaults={"password": hash_password(password)},
            )
            users.append(user)
        return users

    def _seed_products(self, users: list[User]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        for owner in users:
            for name, price in SEED_PRODUCTS:
                product, _ = Product.objects.get_or_create(
                    name=f"{name} ({owner.username})",
                    owner=owner,
                    defaults={"price": price},
                )
                products.append(product)
        return products

    def _seed_updates(self, products: list[Product]) -> list[Update]:
        self.stdout.write("Creating updates...")
        updates: list[Update] = []
        statuses = list(UpdateStatus)
        for product in products:
            if product.updates.exists():
                updates.extend(product.updates.all())
                continue
            for minor in range(random.randint(1, 3)):
                updates.append(
                    Update.objects.create(
                        product=product,
                        title=f"Release 1.{minor}",
                        body=f"Changes shipped in {product.name} 1.{minor}.",
                        status=random.choice(statuses),
                        version=f"1.{minor}.0",
                    )
                )
        return updates

    def _seed_points(self, updates: list[Update]) -> int:
        created = 0
        for update in updates:
            if update.points.exists():
                continue
            for index in range(random.randint(1, 4)):
                UpdatePoint.objects.create(
                    update=update,
                    name=f"Change {index + 1}",
                    description=f"Detail {index + 1} of {update.title}.",
                )
                created += 1
        return created
