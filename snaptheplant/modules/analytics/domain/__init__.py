# 📄 File: snaptheplant/modules/analytics/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for usage analytics and beta feedback, independent of databases and web frameworks.
# 🧪 Purpose (Technical Summary):
# Domain layer: pydantic models, repository contracts and services.
# 🔗 Dependencies:
# pydantic, snaptheplant.shared.core
# 🔄 Connected Modules / Calls From:
# infrastructure and presentation layers

"""
Analytics domain layer.
"""
