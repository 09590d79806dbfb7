# 📄 File: snaptheplant/modules/payment_subscription/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Payments & Subscriptions presentation layer.
"""
