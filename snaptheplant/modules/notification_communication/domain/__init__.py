# 📄 File: snaptheplant/modules/notification_communication/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for emails, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic models, repository contracts and services.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers

"""
Notifications domain layer.
"""
