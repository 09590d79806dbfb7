# 📄 File: snaptheplant/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell SnapThePlant how to connect to databases,
# external services, and how to adjust its behavior.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.main (application startup)
# - Infrastructure components

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
