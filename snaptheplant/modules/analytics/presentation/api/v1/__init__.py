# 📄 File: snaptheplant/modules/analytics/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 web endpoints for usage analytics and beta feedback.
# 🧪 Purpose (Technical Summary):
# FastAPI routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Analytics API v1 routes.
"""
