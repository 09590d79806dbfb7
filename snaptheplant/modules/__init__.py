# 📄 File: snaptheplant/modules/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds every feature area of SnapThePlant, each in its own folder.
# 🧪 Purpose (Technical Summary):
# Feature modules laid out as domain / infrastructure / presentation layers.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# snaptheplant.api.v1.router, snaptheplant.shared.core.container

"""
SnapThePlant feature modules

- user_management: accounts, sessions, entitlements
- plant_management: plants, care schedule
- plant_identification: photo recognition with metered quota
- community_social: public plant posts
- payment_subscription: trials, lifetime purchase, monthly subscription
- notification_communication: transactional email
- analytics: event and feedback recording
"""
