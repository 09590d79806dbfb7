# 📄 File: snaptheplant/modules/plant_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the web app sends and receives for plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# presentation/api/v1 routers

"""
Plant Management API schemas.
"""
