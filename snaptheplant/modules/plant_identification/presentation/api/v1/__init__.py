# 📄 File: snaptheplant/modules/plant_identification/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 web endpoints for plant photo identification.
# 🧪 Purpose (Technical Summary):
# FastAPI routers.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Plant Identification API v1 routes.
"""
