"""
Admin API views.

These endpoints back the operator console:
- Product catalog management
- Inventory and code listings
- Code upload, deletion and manual assignment
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.admin.serializers import (
    AssignCodeRequestSerializer,
    CodeIdRequestSerializer,
    CodeSerializer,
    CreateProductRequestSerializer,
    InventoryRequestSerializer,
    ListCodesRequestSerializer,
    ProductIdRequestSerializer,
    ProductSerializer,
    UpdateProductRequestSerializer,
)
from api.v1.delivery.serializers import (
    AuthenticatedRequestSerializer,
    InventoryStatusResponseSerializer,
    LoadCodesRequestSerializer,
    LoadCodesResponseSerializer,
)
from api.v1.delivery.views import validation_error
from core.domain.value_objects import CodeStatus, ProductStatus
from core.instrumentation import Status, StatusCode, get_tracer
from inventory.application.commands.load_codes import LoadCodesCommand
from inventory.application.commands.manage_code import AssignCodeCommand, DeleteCodeCommand
from inventory.application.handlers.code_admin_handlers import (
    AssignCodeHandler,
    DeleteCodeHandler,
    ListCodesHandler,
)
from inventory.application.handlers.get_inventory_status_handler import GetInventoryStatusHandler
from inventory.application.handlers.load_codes_handler import LoadCodesHandler
from inventory.application.queries.get_inventory_status import GetInventoryStatusQuery
from inventory.application.queries.list_codes import ListCodesQuery
from inventory.infrastructure.repositories.django_code_repository import DjangoCodeRepository
from inventory.infrastructure.repositories.django_delivery_repository import (
    DjangoDeliveryRepository,
)
from products.application.commands.manage_product import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from products.application.handlers.product_handlers import (
    CreateProductHandler,
    DeleteProductHandler,
    ListProductsHandler,
    UpdateProductHandler,
)
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_code_repo = DjangoCodeRepository()
_delivery_repo = DjangoDeliveryRepository()

tracer = get_tracer(__name__)

ADMIN_ERRORS = {
    400: {"description": "Bad Request"},
    401: {"description": "Missing or wrong password"},
}


def success(**data) -> Response:
    """Build a 200 response in the success envelope."""
    return Response({"success": True, **data}, status=status.HTTP_200_OK)


class ListProductsView(APIView):
    """View for listing products."""

    @extend_schema(
        operation_id="admin_list_products",
        summary="List Products",
        tags=["Admin API"],
        request=AuthenticatedRequestSerializer,
        responses={200: ProductSerializer(many=True), **ADMIN_ERRORS},
    )
    def post(self, request: Request) -> Response:
        """List all products, newest first."""
        return async_to_sync(self._handle_list_products)(request)

    async def _handle_list_products(self, request: Request) -> Response:
        """Async handler for list products."""
        with tracer.start_as_current_span("admin_list_products") as span:
            products = await ListProductsHandler(product_repository=_product_repo).handle()
            span.set_attribute("products.count", len(products))
            span.set_status(Status(StatusCode.OK))
            return success(data=ProductSerializer(products, many=True).data)


class CreateProductView(APIView):
    """View for adding a product."""

    @extend_schema(
        operation_id="admin_create_product",
        summary="Add Product",
        tags=["Admin API"],
        request=CreateProductRequestSerializer,
        responses={
            200: ProductSerializer,
            409: {"description": "Product id already exists"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create_product)(request)

    async def _handle_create_product(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("admin_create_product") as span:
            serializer = CreateProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            data = serializer.validated_data
            span.set_attribute("product.id", data["id"])
            command = CreateProductCommand(
                product_id=data["id"],
                name=data["name"],
                description=data.get("description") or None,
                max_per_user=data.get("max_per_user") or 1,
            )
            product = await CreateProductHandler(product_repository=_product_repo).handle(command)

            span.set_status(Status(StatusCode.OK))
            return success(data=ProductSerializer(product).data)


class UpdateProductView(APIView):
    """View for changing product metadata."""

    @extend_schema(
        operation_id="admin_update_product",
        summary="Update Product",
        tags=["Admin API"],
        request=UpdateProductRequestSerializer,
        responses={
            200: ProductSerializer,
            404: {"description": "Product not found"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Apply a partial product update."""
        return async_to_sync(self._handle_update_product)(request)

    async def _handle_update_product(self, request: Request) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("admin_update_product") as span:
            serializer = UpdateProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            data = serializer.validated_data
            span.set_attribute("product.id", data["id"])
            command = UpdateProductCommand(
                product_id=data["id"],
                name=data.get("name"),
                description=data.get("description"),
                max_per_user=data.get("max_per_user"),
                status=ProductStatus(data["status"]) if "status" in data else None,
                clear_description="description" in data and data["description"] is None,
            )
            product = await UpdateProductHandler(product_repository=_product_repo).handle(command)

            span.set_status(Status(StatusCode.OK))
            return success(data=ProductSerializer(product).data)


class DeleteProductView(APIView):
    """View for deleting a product with its codes and deliveries."""

    @extend_schema(
        operation_id="admin_delete_product",
        summary="Delete Product",
        tags=["Admin API"],
        request=ProductIdRequestSerializer,
        responses={
            200: {"description": "Product deleted"},
            404: {"description": "Product not found"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete_product)(request)

    async def _handle_delete_product(self, request: Request) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("admin_delete_product") as span:
            serializer = ProductIdRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            product_id = serializer.validated_data["id"]
            span.set_attribute("product.id", product_id)
            await DeleteProductHandler(product_repository=_product_repo).handle(
                DeleteProductCommand(product_id=product_id)
            )

            span.set_status(Status(StatusCode.OK))
            return success()


class AdminInventoryView(APIView):
    """View for a product's stock counts."""

    @extend_schema(
        operation_id="admin_inventory",
        summary="Inventory Status",
        tags=["Admin API"],
        request=InventoryRequestSerializer,
        responses={200: InventoryStatusResponseSerializer, **ADMIN_ERRORS},
    )
    def post(self, request: Request) -> Response:
        """Get inventory counts."""
        return async_to_sync(self._handle_inventory)(request)

    async def _handle_inventory(self, request: Request) -> Response:
        """Async handler for admin inventory."""
        with tracer.start_as_current_span("admin_inventory") as span:
            serializer = InventoryRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            product_id = serializer.validated_data["product_id"]
            span.set_attribute("product.id", product_id)
            result = await GetInventoryStatusHandler(code_repository=_code_repo).handle(
                GetInventoryStatusQuery(product_id=product_id)
            )

            span.set_status(Status(StatusCode.OK))
            return success(**InventoryStatusResponseSerializer(result).data)


class ListCodesView(APIView):
    """View for listing a product's newest codes."""

    @extend_schema(
        operation_id="admin_list_codes",
        summary="List Codes",
        tags=["Admin API"],
        request=ListCodesRequestSerializer,
        responses={200: CodeSerializer(many=True), **ADMIN_ERRORS},
    )
    def post(self, request: Request) -> Response:
        """List codes."""
        return async_to_sync(self._handle_list_codes)(request)

    async def _handle_list_codes(self, request: Request) -> Response:
        """Async handler for list codes."""
        with tracer.start_as_current_span("admin_list_codes") as span:
            serializer = ListCodesRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            data = serializer.validated_data
            span.set_attribute("product.id", data["product_id"])
            query = ListCodesQuery(
                product_id=data["product_id"],
                status=CodeStatus(data["status"]) if "status" in data else None,
                limit=data["limit"],
            )
            codes = await ListCodesHandler(code_repository=_code_repo).handle(query)

            span.set_attribute("codes.count", len(codes))
            span.set_status(Status(StatusCode.OK))
            return success(data=CodeSerializer(codes, many=True).data)


class AdminLoadCodesView(APIView):
    """View for uploading codes from the operator console."""

    @extend_schema(
        operation_id="admin_upload_codes",
        summary="Upload Codes",
        tags=["Admin API"],
        request=LoadCodesRequestSerializer,
        responses={
            200: LoadCodesResponseSerializer,
            404: {"description": "Product not found"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Upload codes."""
        return async_to_sync(self._handle_load_codes)(request)

    async def _handle_load_codes(self, request: Request) -> Response:
        """Async handler for admin load codes."""
        with tracer.start_as_current_span("admin_upload_codes") as span:
            serializer = LoadCodesRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            product_id = serializer.validated_data["product_id"]
            span.set_attribute("product.id", product_id)
            handler = LoadCodesHandler(product_repository=_product_repo, code_repository=_code_repo)
            result = await handler.handle(
                LoadCodesCommand(product_id=product_id, codes=serializer.validated_data["codes"])
            )

            span.set_status(Status(StatusCode.OK))
            return success(**LoadCodesResponseSerializer(result).data)


class DeleteCodeView(APIView):
    """View for deleting a code."""

    @extend_schema(
        operation_id="admin_delete_code",
        summary="Delete Code",
        tags=["Admin API"],
        request=CodeIdRequestSerializer,
        responses={
            200: {"description": "Code deleted"},
            404: {"description": "Code not found"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Delete a code."""
        return async_to_sync(self._handle_delete_code)(request)

    async def _handle_delete_code(self, request: Request) -> Response:
        """Async handler for delete code."""
        with tracer.start_as_current_span("admin_delete_code") as span:
            serializer = CodeIdRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            code_id = serializer.validated_data["code_id"]
            span.set_attribute("code.id", code_id)
            await DeleteCodeHandler(code_repository=_code_repo).handle(DeleteCodeCommand(code_id=code_id))

            span.set_status(Status(StatusCode.OK))
            return success()


class AssignCodeView(APIView):
    """View for assigning a specific code to a user, bypassing the per-user cap."""

    @extend_schema(
        operation_id="admin_assign_code",
        summary="Assign Code",
        tags=["Admin API"],
        request=AssignCodeRequestSerializer,
        responses={
            200: {"description": "Code assigned"},
            404: {"description": "Code not found"},
            409: {"description": "Code already assigned"},
            **ADMIN_ERRORS,
        },
    )
    def post(self, request: Request) -> Response:
        """Assign a code."""
        return async_to_sync(self._handle_assign_code)(request)

    async def _handle_assign_code(self, request: Request) -> Response:
        """Async handler for assign code."""
        with tracer.start_as_current_span("admin_assign_code") as span:
            serializer = AssignCodeRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            code_id = serializer.validated_data["code_id"]
            span.set_attribute("code.id", code_id)
            handler = AssignCodeHandler(
                product_repository=_product_repo,
                code_repository=_code_repo,
                delivery_repository=_delivery_repo,
            )
            command = AssignCodeCommand(code_id=code_id, user=serializer.validated_data["user"])
            code = await handler.handle(command)

            span.set_status(Status(StatusCode.OK))
            return success(code=code.code)
