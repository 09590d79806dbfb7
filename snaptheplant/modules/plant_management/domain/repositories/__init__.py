# 📄 File: snaptheplant/modules/plant_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promises any storage for plants and their care schedule has to keep.
# 🧪 Purpose (Technical Summary):
# Abstract repository interfaces.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# storage backends, domain services

"""
Plant Management repository interfaces.
"""
