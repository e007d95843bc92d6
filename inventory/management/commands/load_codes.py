"""
Django management command to bulk load codes into a product.

Reads one code per line from a file (or stdin when the path is "-").
Blank lines are ignored; surrounding whitespace is stripped.
"""

import asyncio
import logging
import sys

from django.core.management.base import BaseCommand, CommandError

from core.domain.exceptions import DomainException
from inventory.application.commands.load_codes import LoadCodesCommand
from inventory.application.handlers.load_codes_handler import LoadCodesHandler
from inventory.infrastructure.repositories.django_code_repository import DjangoCodeRepository
from products.infrastructure.repositories.django_product_repository import DjangoProductRepository

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to load codes from a file."""

    help = "Load codes for a product from a file with one code per line"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument("product_id", type=str, help="Product to load codes into")
        parser.add_argument(
            "path",
            type=str,
            help='File with one code per line, or "-" for stdin',
        )

    def handle(self, *args, **options):
        """Execute the command."""
        codes = self._read_codes(options["path"])
        if not codes:
            raise CommandError("No codes to load")

        handler = LoadCodesHandler(
            product_repository=DjangoProductRepository(),
            code_repository=DjangoCodeRepository(),
        )
        command = LoadCodesCommand(product_id=options["product_id"], codes=codes)

        try:
            result = asyncio.run(handler.handle(command))
        except DomainException as exc:
            raise CommandError(exc.message) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"Loaded {result.inserted} codes into {result.product_id} "
                f"({result.duplicates} duplicates skipped)"
            )
        )

    def _read_codes(self, path):
        """Read non-blank lines from a file or stdin."""
        if path == "-":
            lines = sys.stdin.read().splitlines()
        else:
            try:
                with open(path, encoding="utf-8") as handle:
                    lines = handle.read().splitlines()
            except OSError as exc:
                raise CommandError(f"Cannot read {path}: {exc}") from exc
        return [line.strip() for line in lines if line.strip()]
