from .base import *  # noqa
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="4hQm8TzW1cRk0yVn6bLs3XpJ9fGd2uEa7oNi5tKw0rYqZcHv8lMxB1sPe3jDg6Uf",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1"] + env.list("DJANGO_ALLOWED_HOSTS", default=[])

# Grid buttons
# ------------------------------------------------------------------------------
GRIDKIT_ALLOWS_EXPORTING = env.bool("GRIDKIT_ALLOWS_EXPORTING", True)
LOGGING["loggers"]["gridkit"]["level"] = env("GRIDKIT_LOG_LEVEL", default="DEBUG")  # noqa: F405
