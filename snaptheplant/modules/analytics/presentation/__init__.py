# 📄 File: snaptheplant/modules/analytics/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches usage analytics and beta feedback.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Analytics presentation layer.
"""
