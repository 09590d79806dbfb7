# 📄 File: snaptheplant/modules/notification_communication/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts that store or fetch data for emails.
# 🧪 Purpose (Technical Summary):
# Infrastructure adapters.
# 🔗 Dependencies:
# SQLAlchemy / external clients
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage, snaptheplant.shared.core.container

"""
Notifications infrastructure.
"""
