# 📄 File: snaptheplant/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the helpers that wrap every request: one keeps a diary of requests, one turns crashes into tidy error messages.
# 🧪 Purpose (Technical Summary):
# Package initialization for ASGI middleware and exception handler registration.
# 🔗 Dependencies:
# starlette BaseHTTPMiddleware, snaptheplant.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# snaptheplant.main (middleware registration)

"""
SnapThePlant API Middleware

Middleware Stack Order (outermost first):
    1. GZipMiddleware
    2. CORSMiddleware
    3. ErrorHandlingMiddleware (request id, catch-all 500)
    4. RequestLoggingMiddleware (request/response records)
    5. Application routes and exception handlers
"""
