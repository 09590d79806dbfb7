# 📄 File: snaptheplant/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promises any storage for user accounts has to keep.
# 🧪 Purpose (Technical Summary):
# Abstract repository interfaces.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# storage backends, domain services

"""
User Management repository interfaces.
"""
