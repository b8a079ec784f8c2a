"""
Service layer: business rules between routes and repositories.

Import services from their modules, e.g. ``from app.services.blog import
BlogService``; repositories depend on ``app.services.list_query``.
"""
