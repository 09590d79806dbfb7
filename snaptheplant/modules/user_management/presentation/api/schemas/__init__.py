# 📄 File: snaptheplant/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# What the web app sends and receives for user accounts.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core.schemas
# 🔄 Connected Modules / Calls From:
# presentation/api/v1 routers

"""
User Management API schemas.
"""
