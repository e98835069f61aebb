"""
HTTP layer: FastAPI application, routers and request/response schemas.
"""
