# 📄 File: snaptheplant/modules/plant_identification/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the web app sends and receives for plant photo identification.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# presentation/api/v1 routers

"""
Plant Identification API schemas.
"""
