"""Falcon hooks - gate a responder on a resolved permission."""

import falcon

from crowdhub.application.ports import PermissionResolver


def require_permission(resolver: PermissionResolver, resource: str, action: str):
    """Build an async check with the falcon hook signature; it raises 401/403 unless allowed.

    The resolver is only known once resources are built, so resources keep the
    returned callable and await it at the top of the responder.
    """

    async def hook(req, resp, responder_resource, params) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            raise falcon.HTTPUnauthorized(title="Unauthorized")
        decision = await resolver.resolve(user.user_id, resource, action)
        if not decision.allowed:
            raise falcon.HTTPForbidden(title="Permission denied")

    return hook
