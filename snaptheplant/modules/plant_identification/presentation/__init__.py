# 📄 File: snaptheplant/modules/plant_identification/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# How the web app reaches plant photo identification.
# 🧪 Purpose (Technical Summary):
# Presentation layer.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router

"""
Plant Identification presentation layer.
"""
