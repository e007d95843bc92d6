"""
URL configuration for the public delivery API endpoints.
"""

from django.urls import path

from api.v1.delivery import views

urlpatterns = [
    path(
        "get-code",
        views.DeliverCodeView.as_view(),
        name="get-code",
    ),
    path(
        "upload-codes",
        views.LoadCodesView.as_view(),
        name="upload-codes",
    ),
    path(
        "inventory/<str:product_id>",
        views.InventoryStatusView.as_view(),
        name="inventory-status",
    ),
]
