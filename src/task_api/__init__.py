"""
In-memory Task API package.

The application factory lives in task_api.main; `task_api.main:app` is the
ASGI entry point for uvicorn.
"""

__version__ = "0.1.0"
