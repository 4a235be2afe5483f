from .plugin import CREATE_ROLES_HOOK, CustomRoles, CustomRolesVersionException
