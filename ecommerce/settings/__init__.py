# Settings package
from ecommerce.settings.modules import AppSettings, get_app_settings, IntegrationsSettings

__all__ = ["get_app_settings", "AppSettings", "IntegrationsSettings"]
