from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ButtonsConfig(AppConfig):
    name = "gridkit.buttons"
    verbose_name = _("Grid Buttons")
