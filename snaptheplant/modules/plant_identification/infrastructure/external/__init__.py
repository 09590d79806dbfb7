# 📄 File: snaptheplant/modules/plant_identification/infrastructure/external/__init__.py
# 🧭 Purpose (Layman Explanation):
# Talks to the outside service used for plant photo identification.
# 🧪 Purpose (Technical Summary):
# Adapters for third-party APIs.
# 🔗 Dependencies:
# third-party SDK / HTTP client
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.core.container

"""
External service adapters.
"""
