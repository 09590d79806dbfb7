# 📄 File: snaptheplant/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for the API: sends plant requests to the plant handlers, payment
# requests to the payment handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Aggregates every module router under one APIRouter. main.py mounts it at /api; admin
# user management is nested under /admin, the other routers carry their full paths.
# 🔗 Dependencies:
# FastAPI, all module presentation routers
# 🔄 Connected Modules / Calls From:
# snaptheplant.main

from fastapi import APIRouter

from snaptheplant.modules.analytics.presentation.api.v1.analytics import analytics_router
from snaptheplant.modules.community_social.presentation.api.v1.community import community_router
from snaptheplant.modules.notification_communication.presentation.api.v1.emails import emails_router
from snaptheplant.modules.payment_subscription.presentation.api.v1.payments import payments_router
from snaptheplant.modules.payment_subscription.presentation.api.v1.subscriptions import (
    subscriptions_router,
)
from snaptheplant.modules.plant_identification.presentation.api.v1.identify import identify_router
from snaptheplant.modules.plant_management.presentation.api.v1.care_actions import care_actions_router
from snaptheplant.modules.plant_management.presentation.api.v1.plants import plants_router
from snaptheplant.modules.user_management.presentation.api.v1.admin import admin_users_router
from snaptheplant.modules.user_management.presentation.api.v1.auth import auth_router

api_router = APIRouter()

# =========================================================================
# USER MANAGEMENT
# =========================================================================

api_router.include_router(auth_router, tags=["Authentication"])
api_router.include_router(admin_users_router, prefix="/admin", tags=["Admin"])

# =========================================================================
# PLANTS & CARE
# =========================================================================

api_router.include_router(plants_router, tags=["Plants"])
api_router.include_router(care_actions_router, tags=["Care Actions"])
api_router.include_router(identify_router, tags=["Plant Identification"])

# =========================================================================
# COMMUNITY
# =========================================================================

api_router.include_router(community_router, tags=["Community"])

# =========================================================================
# SUBSCRIPTIONS & PAYMENTS
# =========================================================================

api_router.include_router(subscriptions_router, tags=["Subscriptions"])
api_router.include_router(payments_router, tags=["Payments"])

# =========================================================================
# ANALYTICS & NOTIFICATIONS
# =========================================================================

api_router.include_router(analytics_router, tags=["Analytics"])
api_router.include_router(emails_router, tags=["Admin"])
