# 📄 File: snaptheplant/modules/plant_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for plants and their care schedule, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic models, repository contracts and services.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers

"""
Plant Management domain layer.
"""
