"""Permission check API resources."""

import falcon.asgi

from crowdhub.application.dto.permission_check import BatchCheckInput, PermissionCheckInput
from crowdhub.application.use_cases.permission.resolve_permission import (
    ResolvePermissionUseCase,
)


class PermissionCheckResource:
    """POST /v1/rbac/check - resolve one permission, optionally with trace."""

    def __init__(self, resolve_permission: ResolvePermissionUseCase) -> None:
        self._resolve = resolve_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Not authenticated", "allowed": False}
            return

        body = await req.get_media()
        check = PermissionCheckInput.from_request(body, user.user_id)

        decision = await self._resolve.resolve(
            check.user_id, check.resource, check.action, include_trace=check.include_trace
        )
        resp.media = decision.to_dict(include_trace=check.include_trace)
        resp.status = falcon.HTTP_200


class PermissionBatchCheckResource:
    """POST /v1/rbac/check/batch - resolve several pairs for one user."""

    def __init__(self, resolve_permission: ResolvePermissionUseCase) -> None:
        self._resolve = resolve_permission

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Not authenticated"}
            return

        body = await req.get_media()
        batch = BatchCheckInput.from_request(body, user.user_id)

        results = await self._resolve.check_many(batch.user_id, batch.checks)
        resp.media = {"results": results}
        resp.status = falcon.HTTP_200
