# 📄 File: snaptheplant/modules/plant_identification/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for plant photo identification.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
Plant Identification domain models.
"""
