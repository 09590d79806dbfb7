# 📄 File: snaptheplant/modules/community_social/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches community plant posts.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Community presentation layer.
"""
