"""User permission override API resources."""

import falcon
import falcon.asgi

from crowdhub.application.ports import PermissionResolver
from crowdhub.application.use_cases.permission.user_override import (
    ClearUserOverrideUseCase,
    SetUserOverrideUseCase,
)
from crowdhub.interfaces.api.hooks import require_permission


class UserOverridesResource:
    """GET /v1/users/{user_id}/overrides - list a user's overrides."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_resolver: PermissionResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._require_read = require_permission(permission_resolver, "rbac", "read")

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        await self._require_read(req, resp, self, {"user_id": user_id})
        async with self._uow_factory() as uow:
            overrides = await uow.user_permissions.list_by_user(user_id)
            items = []
            for o in overrides:
                permission = await uow.permissions.get_by_id(o.permission_id)
                items.append({
                    "permissionId": str(o.permission_id),
                    "resource": permission.resource if permission else None,
                    "action": permission.action if permission else None,
                    "effect": o.effect.value,
                    "createdBy": o.created_by,
                })
        resp.media = {"items": items}
        resp.status = falcon.HTTP_200


class UserOverrideResource:
    """PUT/DELETE /v1/users/{user_id}/overrides/{resource}/{action}."""

    def __init__(
        self,
        set_override: SetUserOverrideUseCase,
        clear_override: ClearUserOverrideUseCase,
    ) -> None:
        self._set = set_override
        self._clear = clear_override

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        resource: str,
        action: str,
    ) -> None:
        """Set override effect (allow or deny)."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        effect = body.get("effect") if isinstance(body, dict) else None
        override = await self._set.execute(user.user_id, user_id, resource, action, effect)
        resp.media = {
            "userId": override.user_id,
            "permissionId": str(override.permission_id),
            "effect": override.effect.value,
        }
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
        resource: str,
        action: str,
    ) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        await self._clear.execute(user.user_id, user_id, resource, action)
        resp.status = falcon.HTTP_204
