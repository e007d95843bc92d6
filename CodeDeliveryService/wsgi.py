"""
WSGI config for CodeDeliveryService project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "CodeDeliveryService.settings.prod")

application = get_wsgi_application()
