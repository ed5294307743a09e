"""HTTP access to the artifact store."""

from nightscan.api.http import HttpClient

__all__ = ["HttpClient"]
