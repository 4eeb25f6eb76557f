from django.urls import path, re_path

from .views import CartItemDetailView, CartItemListView, CartView

urlpatterns = [
    path("", CartView.as_view(), name="api-cart"),
    path("items/", CartItemListView.as_view(), name="api-cart-items"),
    # Optional trailing slash on the item detail route
    re_path(
        r"^items/(?P<buyable_type>[a-z_]+)/(?P<buyable_id>\d+)/?$",
        CartItemDetailView.as_view(),
        name="api-cart-item-detail",
    ),
]
