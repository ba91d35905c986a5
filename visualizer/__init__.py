"""HTTP control panel for a running fleet"""

from .http_server import create_app, run_server

__all__ = ['create_app', 'run_server']
