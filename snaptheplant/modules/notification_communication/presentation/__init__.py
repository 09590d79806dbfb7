# 📄 File: snaptheplant/modules/notification_communication/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches emails.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Notifications presentation layer.
"""
