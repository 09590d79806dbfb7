# 📄 File: snaptheplant/modules/payment_subscription/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts that store or fetch data for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Infrastructure adapters.
# 🔗 Dependencies:
# SQLAlchemy / external clients
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage, snaptheplant.shared.core.container

"""
Payments & Subscriptions infrastructure.
"""
