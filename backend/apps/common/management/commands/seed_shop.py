from decimal import Decimal

from django.core.management.base import BaseCommand
from django.core.management.color import no_style
from django.db import connection, transaction

from apps.catalog.models import Category, Offer, Package
from apps.payments.models import Payment, PaymentStatus

CATEGORIES = [
    (1, "Ranks", 0),
    (2, "Cosmetics", 1),
]

PACKAGES = [
    (1, "VIP rank", Decimal("9.99"), "Access to the VIP lounge and a coloured name.", 1),
    (2, "MVP rank", Decimal("19.99"), "Everything VIP has plus a monthly crate.", 1),
    (3, "Particle trail", Decimal("2.49"), "A trail of sparks behind your character.", 2),
    (4, "Pet companion", Decimal("4.99"), "A small pet that follows you around.", 2),
]

OFFERS = [
    (1, "500 coins", Decimal("5.00"), Decimal("500")),
    (2, "1200 coins", Decimal("10.00"), Decimal("1200")),
]

PAYMENTS = [
    (Decimal("9.99"), PaymentStatus.COMPLETED, "paypal", "PAY-0001"),
    (Decimal("19.99"), PaymentStatus.COMPLETED, "stripe", "ch_0002"),
    (Decimal("5.00"), PaymentStatus.PENDING, "paypal", None),
    (Decimal("2.49"), PaymentStatus.ERROR, "stripe", "ch_0004"),
]


class Command(BaseCommand):
    help = "Seed demo packages, offers and payments for the shop."

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush", action="store_true", help="Delete existing data before seeding"
        )

    @transaction.atomic
    def handle(self, *args, **options):
        def reset_sequences(models):
            """Reset database sequences for given models (PostgreSQL, etc.)."""
            sql_list = connection.ops.sequence_reset_sql(no_style(), models)
            if not sql_list:
                return
            with connection.cursor() as cursor:
                for sql in sql_list:
                    cursor.execute(sql)

        if options["flush"]:
            self.stdout.write("Flushing existing data...")
            Payment.objects.all().delete()
            Offer.objects.all().delete()
            Package.objects.all().delete()
            Category.objects.all().delete()

        self.stdout.write("Seeding categories...")
        categories = {}
        for cid, name, position in CATEGORIES:
            category, _ = Category.objects.get_or_create(
                id=cid, defaults={"name": name, "position": position}
            )
            categories[cid] = category

        self.stdout.write("Seeding packages...")
        for pid, name, price, description, category_id in PACKAGES:
            Package.objects.update_or_create(
                id=pid,
                defaults={
                    "name": name,
                    "price": price,
                    "description": description,
                    "category": categories[category_id],
                },
            )

        self.stdout.write("Seeding offers...")
        for oid, name, price, money in OFFERS:
            Offer.objects.update_or_create(
                id=oid, defaults={"name": name, "price": price, "money": money}
            )

        self.stdout.write("Seeding payments...")
        for price, status, gateway, transaction_id in PAYMENTS:
            Payment.objects.get_or_create(
                gateway_type=gateway,
                transaction_id=transaction_id,
                defaults={"price": price, "status": status},
            )

        # Explicit ids were inserted above; move sequences past them
        reset_sequences([Category, Package, Offer])

        self.stdout.write(self.style.SUCCESS("Shop seed completed."))
