"""
Integracion one-way con la fuente externa de posts (solo lectura).
"""
from .posts_client import FetchResult, PostsSourceClient, parse_remote_post

__all__ = ["FetchResult", "PostsSourceClient", "parse_remote_post"]
