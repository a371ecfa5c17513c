"""Current user's permission context."""

import falcon.asgi

from crowdhub.application.use_cases.permission.load_permission_context import (
    LoadPermissionContextUseCase,
)


class PermissionContextResource:
    """GET /v1/rbac/context - roles and effective permissions of the caller."""

    def __init__(self, load_context: LoadPermissionContextUseCase) -> None:
        self._load = load_context

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        context = await self._load.execute(user.user_id)
        resp.media = {
            "userId": context.user_id,
            "roles": context.role_names,
            "isSuperAdmin": context.is_super_admin,
            "isTenantAdmin": context.is_tenant_admin,
            "permissions": [
                {
                    "resource": permission.resource,
                    "action": permission.action,
                    "allowed": decision.allowed,
                    "reason": decision.trace[-1].reason if decision.trace else "",
                }
                for permission, decision in context.effective_permissions()
            ],
        }
        resp.status = falcon.HTTP_200
