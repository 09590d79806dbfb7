# 📄 File: snaptheplant/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for user accounts.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
User Management domain models.
"""
