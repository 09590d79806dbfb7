# 📄 File: snaptheplant/modules/plant_management/infrastructure/memory/__init__.py
# 🧭 Purpose (Layman Explanation):
# Keeps plants and their care schedule in memory for development and tests.
# 🧪 Purpose (Technical Summary):
# In-memory repository implementations.
# 🔗 Dependencies:
# snaptheplant.shared.infrastructure.storage.memory_tables
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage.memory

"""
In-memory persistence.
"""
