# 📄 File: snaptheplant/modules/notification_communication/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for emails.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
Notifications domain models.
"""
