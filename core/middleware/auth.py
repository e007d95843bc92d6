"""
Shared-secret authentication middleware.

Every ``/api/`` request must carry the configured API secret, either as the
``password`` field of its JSON body, as the ``password`` query parameter, or
in the ``X-API-Secret`` header.
"""

import hmac
import json
import logging
from typing import Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

PROTECTED_PREFIX = "/api/"
PUBLIC_PATHS = (
    "/api/schema/",
    "/api/docs/",
)


def _error(message: str, status: int, code: str) -> JsonResponse:
    return JsonResponse(
        {"success": False, "error": {"code": code, "message": message}},
        status=status,
    )


class SharedSecretAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for shared-secret authentication.

    This middleware:
    1. Leaves OPTIONS requests, non-API paths and the schema/docs endpoints alone
    2. Extracts the secret from header, query string or JSON body
    3. Compares it in constant time against settings.API_SECRET
    4. Returns 401 Unauthorized on a missing or wrong secret
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate the shared secret.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        if request.method == "OPTIONS" or self._should_skip_auth(request.path):
            return None

        expected = getattr(settings, "API_SECRET", "")
        if not expected:
            logger.error("API_SECRET is not configured, rejecting %s", request.path)
            return _error("API secret not configured", 503, "AUTH_NOT_CONFIGURED")

        provided = self._extract_secret(request)
        if not provided:
            return _error("Missing password", 401, "UNAUTHORIZED")

        if not hmac.compare_digest(provided.encode(), expected.encode()):
            logger.warning(
                "Invalid API secret attempted",
                extra={"path": request.path, "remote_addr": request.META.get("REMOTE_ADDR")},
            )
            return _error("Wrong password", 401, "UNAUTHORIZED")

        return None

    def _should_skip_auth(self, path: str) -> bool:
        """
        Check if authentication should be skipped for this path.

        Args:
            path: Request path

        Returns:
            True if auth should be skipped
        """
        if not path.startswith(PROTECTED_PREFIX):
            return True
        return any(path.startswith(public) for public in PUBLIC_PATHS)

    def _extract_secret(self, request: HttpRequest) -> Optional[str]:
        """
        Find the secret on the request.

        Args:
            request: HTTP request

        Returns:
            The supplied secret or None
        """
        header = request.headers.get("X-API-Secret")
        if header:
            return header

        query = request.GET.get("password")
        if query:
            return query

        if request.method in ("POST", "PUT", "PATCH") and request.content_type == "application/json":
            try:
                body = json.loads(request.body or b"{}")
            except (ValueError, UnicodeDecodeError):
                # A malformed body carries no secret
                return None
            if isinstance(body, dict):
                password = body.get("password")
                if isinstance(password, str):
                    return password
        return None
