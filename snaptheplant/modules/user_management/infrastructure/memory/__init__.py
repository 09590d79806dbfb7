# 📄 File: snaptheplant/modules/user_management/infrastructure/memory/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps user accounts in memory for development and tests.
# 🧪 Purpose (Technical Summary):
# In-memory repository implementations.
# 🔗 Dependencies:
# snaptheplant.shared.infrastructure.storage.memory_tables
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage.memory

"""
In-memory persistence.
"""
