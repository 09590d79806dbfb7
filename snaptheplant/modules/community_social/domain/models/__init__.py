# 📄 File: snaptheplant/modules/community_social/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The shapes of the data used for community plant posts.
# 🧪 Purpose (Technical Summary):
# Domain models (pydantic).
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# domain services, repositories, API schemas

"""
Community domain models.
"""
