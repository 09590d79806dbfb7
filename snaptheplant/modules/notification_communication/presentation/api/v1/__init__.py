# 📄 File: snaptheplant/modules/notification_communication/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 web endpoints for emails.
# 🧪 Purpose (Technical Summary):
# FastAPI routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Notifications API v1 routes.
"""
