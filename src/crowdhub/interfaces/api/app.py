"""Falcon ASGI application."""

from dataclasses import dataclass

import falcon.asgi
from falcon.asgi import App

from crowdhub.interfaces.api.errors import register_error_handlers
from crowdhub.interfaces.api.resources.guard import GuardResource
from crowdhub.interfaces.api.resources.health import HealthResource
from crowdhub.interfaces.api.resources.permission_check import (
    PermissionBatchCheckResource,
    PermissionCheckResource,
)
from crowdhub.interfaces.api.resources.permission_context import PermissionContextResource
from crowdhub.interfaces.api.resources.user_overrides import (
    UserOverrideResource,
    UserOverridesResource,
)
from crowdhub.interfaces.api.resources.user_roles import UserRoleResource, UserRolesResource


@dataclass
class ApiResources:
    """All resources served by the API."""

    health: HealthResource
    check: PermissionCheckResource
    batch_check: PermissionBatchCheckResource
    context: PermissionContextResource
    guard: GuardResource
    user_roles: UserRolesResource
    user_role: UserRoleResource
    user_overrides: UserOverridesResource
    user_override: UserOverrideResource


def create_app(resources: ApiResources, middleware: list | None = None) -> App:
    """Create Falcon ASGI app with routes and error handlers."""
    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)
    app.add_route("/v1/health", resources.health)
    app.add_route("/v1/health/ready", resources.health, suffix="ready")
    app.add_route("/v1/rbac/check", resources.check)
    app.add_route("/v1/rbac/check/batch", resources.batch_check)
    app.add_route("/v1/rbac/context", resources.context)
    app.add_route("/v1/rbac/guard", resources.guard)
    app.add_route("/v1/users/{user_id}/roles", resources.user_roles)
    app.add_route("/v1/users/{user_id}/roles/{role_name}", resources.user_role)
    app.add_route("/v1/users/{user_id}/overrides", resources.user_overrides)
    app.add_route(
        "/v1/users/{user_id}/overrides/{resource}/{action}", resources.user_override
    )
    return app
