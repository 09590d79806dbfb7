# 📄 File: snaptheplant/modules/payment_subscription/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The actions you can take around trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Domain services operating through the storage unit of work.
# 🔗 Dependencies:
# domain models, snaptheplant.shared.infrastructure.storage
# 🔄 Connected Modules / Calls From:
# API routers, snaptheplant.shared.core.container

"""
Payments & Subscriptions domain services.
"""
