"""
Project configuration.
"""
import os

import django


def setup(settings_module: str = 'config.settings.local') -> None:
    """Point Django at ``settings_module`` unless one is already set, then configure it."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', settings_module)
    django.setup()
