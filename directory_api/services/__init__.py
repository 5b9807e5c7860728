"""
Application services (use cases).

Routers call these services; services orchestrate validation and the stores
and raise ``directory_api.domain.errors`` exceptions on failure.
"""
