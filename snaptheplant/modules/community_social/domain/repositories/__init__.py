# 📄 File: snaptheplant/modules/community_social/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The promises any storage for community plant posts has to keep.
# 🧪 Purpose (Technical Summary):
# Abstract repository interfaces.
# 🔗 Dependencies:
# abc, domain models
# 🔄 Connected Modules / Calls From:
# storage backends, domain services

"""
Community repository interfaces.
"""
