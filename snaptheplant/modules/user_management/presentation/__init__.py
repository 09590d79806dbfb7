# 📄 File: snaptheplant/modules/user_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches user accounts.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
User Management presentation layer.
"""
