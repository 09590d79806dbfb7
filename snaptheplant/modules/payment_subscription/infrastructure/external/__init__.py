# 📄 File: snaptheplant/modules/payment_subscription/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Talks to the outside service used for trials, payments and subscriptions.
# 🧪 Purpose (Technical Summary):
# Adapters for third-party APIs.
# 🔗 Dependencies:
# third-party SDK / HTTP client
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container

"""
External service adapters.
"""
