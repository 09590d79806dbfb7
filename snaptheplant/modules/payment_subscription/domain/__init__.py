# 📄 File: snaptheplant/modules/payment_subscription/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for trials, payments and subscriptions, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic models, repository contracts and services.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers

"""
Payments & Subscriptions domain layer.
"""
