"""GraphQL transport and the operation catalog.

IMPORT CONSTRAINT: lin.api imports from lin.models and lin.errors only.
"""

from __future__ import annotations

from lin.api.client import LINEAR_API_URL, GraphQLClient, api_url_from_env, authorization_header
from lin.api.operations import Operation

__all__ = ["LINEAR_API_URL", "GraphQLClient", "Operation", "api_url_from_env", "authorization_header"]
