"""Application entry point and composition root."""

import argparse
import logging

from crowdhub import __version__
from crowdhub.application.use_cases.permission.assign_role import AssignRoleUseCase
from crowdhub.application.use_cases.permission.load_permission_context import (
    LoadPermissionContextUseCase,
)
from crowdhub.application.use_cases.permission.resolve_permission import (
    ResolvePermissionUseCase,
)
from crowdhub.application.use_cases.permission.revoke_role import RevokeRoleUseCase
from crowdhub.application.use_cases.permission.user_override import (
    ClearUserOverrideUseCase,
    SetUserOverrideUseCase,
)
from crowdhub.config import Settings, get_settings
from crowdhub.infrastructure.auth.keycloak_provider import KeycloakProvider
from crowdhub.infrastructure.permission.feature_flags import StaticFeatureFlags
from crowdhub.infrastructure.persistence.postgres.connection import create_pool
from crowdhub.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from crowdhub.interfaces.api.app import ApiResources, create_app
from crowdhub.interfaces.api.middleware.auth import AuthMiddleware
from crowdhub.interfaces.api.middleware.cors import CORSMiddleware
from crowdhub.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from crowdhub.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_resources(uow_factory, settings: Settings, pool=None) -> ApiResources:
    """Wire use cases into API resources."""
    resolver = ResolvePermissionUseCase(unit_of_work_factory=uow_factory)
    load_context = LoadPermissionContextUseCase(
        unit_of_work_factory=uow_factory,
        legacy_aliases=settings.legacy_aliases(),
    )
    assign_role = AssignRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    revoke_role = RevokeRoleUseCase(unit_of_work_factory=uow_factory, permission_resolver=resolver)
    set_override = SetUserOverrideUseCase(
        unit_of_work_factory=uow_factory, permission_resolver=resolver
    )
    clear_override = ClearUserOverrideUseCase(
        unit_of_work_factory=uow_factory, permission_resolver=resolver
    )

    return ApiResources(
        health=HealthResource(pool),
        check=PermissionCheckResource(resolver),
        batch_check=PermissionBatchCheckResource(resolver),
        context=PermissionContextResource(load_context),
        guard=GuardResource(
            load_context,
            StaticFeatureFlags(settings.enabled_features),
            settings.legacy_role_permissions,
            legacy_fallback=settings.guard_legacy_fallback,
        ),
        user_roles=UserRolesResource(uow_factory, resolver, assign_role),
        user_role=UserRoleResource(revoke_role),
        user_overrides=UserOverridesResource(uow_factory, resolver),
        user_override=UserOverrideResource(set_override, clear_override),
    )


def create_crowdhub_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        max_size=settings.database_pool_max_size,
        timeout=settings.database_timeout,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; bearer tokens will not be accepted")

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    middleware = [
        CORSMiddleware(cors_origins),
        PoolLifespanMiddleware(pool),
        AuthMiddleware(
            keycloak,
            allow_dev_header=settings.debug and settings.environment == "development",
        ),
    ]
    return create_app(build_resources(uow_factory, settings, pool), middleware)


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    import uvicorn

    parser = argparse.ArgumentParser(description=f"CrowdHub RBAC service v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    uvicorn.run(create_crowdhub_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
