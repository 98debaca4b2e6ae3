"""
Campus Aid API package.

Provides the FastAPI application for the campus mutual-aid marketplace.
The application itself is built by ``api.app:create_app``.
"""
