"""
URL configuration for the admin API endpoints.
"""

from django.urls import path

from api.v1.admin import views

urlpatterns = [
    path("products", views.ListProductsView.as_view(), name="admin-list-products"),
    path("products/add", views.CreateProductView.as_view(), name="admin-create-product"),
    path("products/update", views.UpdateProductView.as_view(), name="admin-update-product"),
    path("products/delete", views.DeleteProductView.as_view(), name="admin-delete-product"),
    path("inventory", views.AdminInventoryView.as_view(), name="admin-inventory"),
    path("codes", views.ListCodesView.as_view(), name="admin-list-codes"),
    path("codes/upload", views.AdminLoadCodesView.as_view(), name="admin-upload-codes"),
    path("codes/delete", views.DeleteCodeView.as_view(), name="admin-delete-code"),
    path("codes/assign", views.AssignCodeView.as_view(), name="admin-assign-code"),
]
