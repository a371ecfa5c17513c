"""Default roles and permissions installed with the schema.

Lookup stops at the first permission record found, so a ``*:*`` rule alone
does not cover permissions that also exist as exact records. ``super_admin``
therefore carries an explicit allow on every seeded permission.
"""

DEFAULT_PERMISSIONS: list[tuple[str, str, str]] = [
    ("*", "*", "Everything"),
    ("rbac", "read", "View role assignments and overrides"),
    ("rbac", "manage", "Manage roles, assignments and overrides"),
    ("dashboard", "read", "View dashboard"),
    ("requests", "read_own", "View own requests"),
    ("requests", "read_all", "View all company requests"),
    ("hardware", "create", "Create hardware requests"),
    ("hardware", "approve", "Approve hardware requests"),
    ("tickets", "*", "All ticket actions"),
    ("tickets", "create", "Create tickets"),
    ("news", "read", "Read news"),
    ("news", "update", "Edit news"),
    ("knowledge_base", "manage", "Manage knowledge base"),
]

ALLOW = "allow"

DEFAULT_ROLES: list[tuple[str, str, list[tuple[str, str, str]]]] = [
    (
        "super_admin",
        "Full access",
        [(resource, action, ALLOW) for resource, action, _ in DEFAULT_PERMISSIONS],
    ),
    (
        "tenant_admin",
        "Company administrator",
        [
            ("rbac", "read", ALLOW),
            ("rbac", "manage", ALLOW),
            ("dashboard", "read", ALLOW),
            ("requests", "read_all", ALLOW),
            ("hardware", "approve", ALLOW),
        ],
    ),
    (
        "manager",
        "Department manager",
        [
            ("dashboard", "read", ALLOW),
            ("requests", "read_all", ALLOW),
            ("hardware", "approve", ALLOW),
            ("tickets", "*", ALLOW),
        ],
    ),
    (
        "requester",
        "Standard staff member",
        [
            ("dashboard", "read", ALLOW),
            ("requests", "read_own", ALLOW),
            ("hardware", "create", ALLOW),
            ("tickets", "create", ALLOW),
            ("news", "read", ALLOW),
        ],
    ),
]
