import os

import django
import pytest
from django.test.utils import setup_test_environment

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
django.setup()
setup_test_environment()


@pytest.fixture
def client():
    from django.test import Client

    return Client()
