# 📄 File: snaptheplant/background_jobs/tasks/__init__.py
# 🧭 Purpose (Layman Explanation):
# The individual scheduled chores the background worker can run.
# 🧪 Purpose (Technical Summary):
# Celery task modules.
# 🔗 Dependencies:
# celery, snaptheplant.shared.core.container
# 🔄 Connected Modules / Calls From:
# snaptheplant.background_jobs.celery_app (include list)

"""
Celery task modules.
"""
