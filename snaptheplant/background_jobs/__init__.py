# 📄 File: snaptheplant/background_jobs/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the background worker setup for chores that run on a schedule.
# 🧪 Purpose (Technical Summary):
# Package initialization for the Celery application and its tasks.
# 🔗 Dependencies:
# celery
# 🔄 Connected Modules / Calls From:
# celery worker / beat CLI

"""
Background jobs (Celery).
"""
