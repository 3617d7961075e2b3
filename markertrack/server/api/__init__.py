"""
API package: versioned FastAPI routers.
"""
