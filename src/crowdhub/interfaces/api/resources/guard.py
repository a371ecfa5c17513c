"""Guard evaluation for the portal frontend."""

import logging
from collections.abc import Iterable, Mapping

import falcon.asgi

from crowdhub.application.ports import FeatureFlagStore
from crowdhub.application.use_cases.permission.load_permission_context import (
    LoadPermissionContextUseCase,
)
from crowdhub.domain.exceptions import StoreUnavailable, ValidationError
from crowdhub.infrastructure.permission.legacy_checker import LegacyPermissionChecker
from crowdhub.interfaces.guard import GuardOutcome, PermissionGuard

logger = logging.getLogger(__name__)


class GuardResource:
    """POST /v1/rbac/guard - evaluate a guard for the caller.

    Uses the caller's permission context. When the permission store is
    unavailable the guard denies and reports ``source: unavailable``. With
    ``legacy_fallback`` it answers from the legacy checker over the token's
    realm roles instead and reports ``source: legacy``.
    """

    def __init__(
        self,
        load_context: LoadPermissionContextUseCase,
        feature_flags: FeatureFlagStore,
        legacy_role_permissions: Mapping[str, Iterable[str]],
        legacy_fallback: bool = False,
    ) -> None:
        self._load = load_context
        self._features = feature_flags
        self._legacy_role_permissions = legacy_role_permissions
        self._legacy_fallback = legacy_fallback

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        body = await req.get_media()
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        permission = body.get("permission")
        feature = body.get("feature")
        if feature is not None and not isinstance(feature, str):
            raise ValidationError("feature must be a string")
        require_all = body.get("requireAll", False)
        if not isinstance(require_all, bool):
            raise ValidationError("requireAll must be a boolean")

        try:
            context = await self._load.execute(user.user_id)
            guard = PermissionGuard(context=context, feature_flags=self._features)
            source = "rbac"
        except StoreUnavailable as e:
            if self._legacy_fallback:
                logger.warning("Falling back to legacy permissions for %s: %s", user.user_id, e)
                legacy = LegacyPermissionChecker(
                    self._legacy_role_permissions, getattr(user, "realm_roles", [])
                )
                guard = PermissionGuard(legacy_checker=legacy, feature_flags=self._features)
                source = "legacy"
            else:
                logger.warning("Guard denied for %s, store unavailable: %s", user.user_id, e)
                guard = PermissionGuard(feature_flags=self._features, error=str(e))
                source = "unavailable"

        outcome = guard.evaluate(permission, feature=feature, require_all=require_all)
        resp.media = {
            "outcome": outcome.value,
            "visible": outcome == GuardOutcome.ALLOWED,
            "source": source,
        }
        resp.status = falcon.HTTP_200
