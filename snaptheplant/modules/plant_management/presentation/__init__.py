# 📄 File: snaptheplant/modules/plant_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches plants and their care schedule.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Plant Management presentation layer.
"""
