# 📄 File: snaptheplant/modules/plant_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
Plant Management domain models.
"""
