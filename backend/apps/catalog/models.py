from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class BuyableType(models.TextChoices):
    """Discriminator stored in the session cart for every buyable kind."""

    PACKAGE = "package", _("Package")
    OFFER = "offer", _("Offer")


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)
    position = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["position", "id"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Buyable(models.Model):
    """
    Anything that can be put in the cart.

    Concrete models pin ``buyable_type`` at class level; the cart derives row
    ids and session records from it, never from the class name.
    """

    buyable_type: BuyableType

    name = models.CharField(max_length=150)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    is_enabled = models.BooleanField(default=True)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True

    def __str__(self):
        return self.name


class Package(Buyable):
    buyable_type = BuyableType.PACKAGE

    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="packages",
    )
    description = models.TextField(blank=True, default="")
    image = models.TextField(blank=True, default="")

    class Meta:
        indexes = [
            models.Index(fields=["is_enabled"], name="package_enabled_idx"),
        ]


class Offer(Buyable):
    buyable_type = BuyableType.OFFER

    # Site money credited to the buyer once the payment completes
    money = models.DecimalField(max_digits=10, decimal_places=2)
