# 📄 File: snaptheplant/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for user accounts, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic models, repository contracts and services.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers

"""
User Management domain layer.
"""
