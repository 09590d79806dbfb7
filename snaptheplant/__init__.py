# 📄 File: snaptheplant/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'snaptheplant' folder as the home of our plant care backend and records
# which version of the app this is.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the SnapThePlant FastAPI service.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - snaptheplant.main (application entry point)
# - snaptheplant.shared.config.settings (version defaults)

"""
SnapThePlant Backend - plant identification, care scheduling and premium subscriptions.
"""

__version__ = "1.0.0"
__title__ = "SnapThePlant API"
__description__ = "Plant identification and care tracking backend"
