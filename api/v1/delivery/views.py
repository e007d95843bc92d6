"""
Public delivery API views.

These endpoints are used by storefronts and bots to:
- Hand a code to a user
- Upload new codes
- Check remaining stock
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import error_body
from api.v1.delivery.serializers import (
    DeliverCodeRequestSerializer,
    DeliverCodeResponseSerializer,
    InventoryStatusResponseSerializer,
    LoadCodesRequestSerializer,
    LoadCodesResponseSerializer,
)
from core.instrumentation import Status, StatusCode, get_tracer
from inventory.application.commands.deliver_code import DeliverCodeCommand
from inventory.application.commands.load_codes import LoadCodesCommand
from inventory.application.handlers.deliver_code_handler import DeliverCodeHandler
from inventory.application.handlers.get_inventory_status_handler import GetInventoryStatusHandler
from inventory.application.handlers.load_codes_handler import LoadCodesHandler
from inventory.application.queries.get_inventory_status import GetInventoryStatusQuery
from inventory.infrastructure.repositories.django_code_repository import DjangoCodeRepository
from inventory.infrastructure.repositories.django_delivery_repository import (
    DjangoDeliveryRepository,
)
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_code_repo = DjangoCodeRepository()
_delivery_repo = DjangoDeliveryRepository()

tracer = get_tracer(__name__)

PASSWORD_QUERY_PARAMETER = OpenApiParameter(
    name="password",
    type=str,
    location=OpenApiParameter.QUERY,
    required=False,
    description="Shared API secret (alternatively the X-API-Secret header)",
)


def validation_error(errors) -> Response:
    """Build the 400 response for an invalid request body."""
    return Response(
        error_body("VALIDATION_ERROR", "Invalid request", errors),
        status=status.HTTP_400_BAD_REQUEST,
    )


class DeliverCodeView(APIView):
    """View for handing a code to a user."""

    @extend_schema(
        operation_id="get_code",
        summary="Get Code",
        description=(
            "Give the user a code of the product. Once the user holds as many codes "
            "as the product allows, the most recently delivered code is returned "
            "again with is_new=false."
        ),
        tags=["Delivery API"],
        request=DeliverCodeRequestSerializer,
        responses={
            200: DeliverCodeResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Missing or wrong password"},
            404: {"description": "Product not found or out of stock"},
            409: {"description": "Too much contention, retry later"},
        },
    )
    def post(self, request: Request) -> Response:
        """Deliver a code."""
        return async_to_sync(self._handle_deliver_code)(request)

    async def _handle_deliver_code(self, request: Request) -> Response:
        """Async handler for deliver code."""
        with tracer.start_as_current_span("deliver_code") as span:
            span.set_attribute("operation", "deliver_code")

            serializer = DeliverCodeRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            product_id = serializer.validated_data["product_id"]
            span.set_attribute("product.id", product_id)

            handler = DeliverCodeHandler(
                product_repository=_product_repo,
                code_repository=_code_repo,
                delivery_repository=_delivery_repo,
            )
            command = DeliverCodeCommand(product_id=product_id, user=serializer.validated_data["user"])

            result = await handler.handle(command)

            span.set_attribute("delivery.is_new", result.is_new)
            span.set_attribute("delivery.count", result.count)
            span.set_status(Status(StatusCode.OK))

            data = DeliverCodeResponseSerializer(result).data
            return Response({"success": True, **data}, status=status.HTTP_200_OK)


class LoadCodesView(APIView):
    """View for uploading codes."""

    @extend_schema(
        operation_id="upload_codes",
        summary="Upload Codes",
        description=(
            "Add codes to a product's pool. Codes that already exist, in any product "
            "or earlier in the same list, are skipped and counted as duplicates."
        ),
        tags=["Delivery API"],
        request=LoadCodesRequestSerializer,
        responses={
            200: LoadCodesResponseSerializer,
            400: {"description": "Bad Request"},
            401: {"description": "Missing or wrong password"},
            404: {"description": "Product not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Upload codes."""
        return async_to_sync(self._handle_load_codes)(request)

    async def _handle_load_codes(self, request: Request) -> Response:
        """Async handler for load codes."""
        with tracer.start_as_current_span("load_codes") as span:
            span.set_attribute("operation", "load_codes")

            serializer = LoadCodesRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error(serializer.errors)

            product_id = serializer.validated_data["product_id"]
            codes = serializer.validated_data["codes"]
            span.set_attribute("product.id", product_id)
            span.set_attribute("codes.count", len(codes))

            handler = LoadCodesHandler(product_repository=_product_repo, code_repository=_code_repo)
            result = await handler.handle(LoadCodesCommand(product_id=product_id, codes=codes))

            span.set_attribute("codes.inserted", result.inserted)
            span.set_attribute("codes.duplicates", result.duplicates)
            span.set_status(Status(StatusCode.OK))

            data = LoadCodesResponseSerializer(result).data
            return Response({"success": True, **data}, status=status.HTTP_200_OK)


class InventoryStatusView(APIView):
    """View for checking a product's stock."""

    @extend_schema(
        operation_id="get_inventory",
        summary="Inventory Status",
        description=(
            "Count available and assigned codes of a product. "
            "An unknown product reports zero of each."
        ),
        tags=["Delivery API"],
        parameters=[PASSWORD_QUERY_PARAMETER],
        responses={
            200: InventoryStatusResponseSerializer,
            401: {"description": "Missing or wrong password"},
        },
    )
    def get(self, request: Request, product_id: str) -> Response:
        """Get inventory status."""
        return async_to_sync(self._handle_inventory_status)(request, product_id)

    async def _handle_inventory_status(self, request: Request, product_id: str) -> Response:
        """Async handler for inventory status."""
        with tracer.start_as_current_span("inventory_status") as span:
            span.set_attribute("operation", "inventory_status")
            span.set_attribute("product.id", product_id)

            handler = GetInventoryStatusHandler(code_repository=_code_repo)
            result = await handler.handle(GetInventoryStatusQuery(product_id=product_id))

            span.set_attribute("inventory.available", result.available)
            span.set_attribute("inventory.assigned", result.assigned)
            span.set_status(Status(StatusCode.OK))

            data = InventoryStatusResponseSerializer(result).data
            return Response({"success": True, **data}, status=status.HTTP_200_OK)
