# 📄 File: snaptheplant/modules/payment_subscription/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
Payments & Subscriptions domain models.
"""
