"""User role assignment API resources."""

import falcon
import falcon.asgi

from crowdhub.application.ports import PermissionResolver
from crowdhub.application.use_cases.permission.assign_role import AssignRoleUseCase
from crowdhub.application.use_cases.permission.revoke_role import RevokeRoleUseCase
from crowdhub.interfaces.api.hooks import require_permission


class UserRolesResource:
    """GET/POST /v1/users/{user_id}/roles - list and assign roles."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
        assign_role: AssignRoleUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._assign = assign_role
        self._require_read = require_permission(permission_resolver, "rbac", "read")

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """List roles held by user."""
        await self._require_read(req, resp, self, {"user_id": user_id})
        async with self._uow_factory() as uow:
            roles = await uow.roles.list_for_user(user_id)
        resp.media = {
            "items": [
                {"id": str(r.id), "name": r.name, "description": r.description}
                for r in roles
            ]
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Assign role to user."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        role_name = body.get("role") if isinstance(body, dict) else None
        if not isinstance(role_name, str) or not role_name:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Missing required field: role"}
            return

        assignment = await self._assign.execute(user.user_id, user_id, role_name)
        resp.media = {
            "userId": assignment.user_id,
            "roleId": str(assignment.role_id),
            "role": role_name,
        }
        resp.status = falcon.HTTP_201


class UserRoleResource:
    """DELETE /v1/users/{user_id}/roles/{role_name} - revoke role."""

    def __init__(self, revoke_role: RevokeRoleUseCase) -> None:
        self._revoke = revoke_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        role_name: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        await self._revoke.execute(user.user_id, user_id, role_name)
        resp.status = falcon.HTTP_204
