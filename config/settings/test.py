"""
With these settings, tests run faster.
"""

from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="Nq3zVv0f9b8cYpR1sK7wLx2mT5hJ4dGa6eUo0iBy3nCrQ8tWlZ1kXsPdHm7jFv2e",
)
TEST_RUNNER = "django.test.runner.DiscoverRunner"
DATABASES = {"default": env.db("DATABASE_URL", default="sqlite://:memory:")}

# PASSWORDS
# ------------------------------------------------------------------------------
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# DEBUGGING FOR TEMPLATES
# ------------------------------------------------------------------------------
TEMPLATES[0]["OPTIONS"]["debug"] = True  # type: ignore # noqa: F405

# Grid buttons
# ------------------------------------------------------------------------------
GRIDKIT_BUTTONS_TO_GENERATE = ["create", "view", "delete", "refresh", "export"]
GRIDKIT_ALLOWS_EXPORTING = False
GRIDKIT_EXPORT_FORMATS = ["csv", "json"]
