"""User records and the viewer/users responses."""

from __future__ import annotations

from lin.models.base import Connection, Record


class User(Record):
    id: str
    name: str
    email: str
    active: bool
    display_name: str | None = None


class ViewerResponse(Record):
    viewer: User


class UsersResponse(Record):
    users: Connection[User]
