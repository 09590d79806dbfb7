# 📄 File: snaptheplant/modules/plant_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# The parts that store or fetch data for plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# Infrastructure adapters.
# 🔗 Dependencies:
# SQLAlchemy / external clients
# 🔄 Connected Modules / Calls From:
# snaptheplant.shared.infrastructure.storage, snaptheplant.shared.core.container

"""
Plant Management infrastructure.
"""
