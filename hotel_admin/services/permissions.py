"""
Permission resolver.

Turns a caller identity into the full capability record used by route guards
and the dashboard. Admins get everything; staff get what their stored grants
allow, except role management, user edits, deletes and account toggling,
which no staff grant can reach; everyone else gets nothing.
"""
from typing import Dict, Optional

from hotel_admin.models.permissions import (
    AdminIdentity,
    Identity,
    Permissions,
    StaffIdentity,
    StoredPermissions,
    UserIdentity,
)


def stored_permissions_from(raw: Optional[Dict]) -> StoredPermissions:
    """Read stored grants; anything other than a literal True is not granted"""
    if not isinstance(raw, dict):
        return StoredPermissions()
    return StoredPermissions(**{
        name: raw.get(name) is True
        for name in StoredPermissions.model_fields
    })


def identity_from_profile(profile: Optional[Dict]) -> Identity:
    """Build the caller identity from a stored profile document"""
    role = (profile or {}).get("role")
    if role == "admin":
        return AdminIdentity()
    if role == "staff":
        return StaffIdentity(permissions=stored_permissions_from(profile.get("permissions")))
    return UserIdentity()


def resolve_permissions(identity: Identity) -> Permissions:
    if isinstance(identity, AdminIdentity):
        return Permissions(
            can_manage_users=True,
            can_manage_roles=True,
            can_view_users=True,
            can_edit_users=True,
            can_delete_users=True,
            can_manage_rooms=True,
            can_manage_bookings=True,
            can_view_bookings=True,
            can_edit_bookings=True,
            can_delete_bookings=True,
            can_access_settings=True,
            can_toggle_user_status=True,
            can_manage_staff=True,
        )

    if isinstance(identity, StaffIdentity):
        granted = identity.permissions
        return Permissions(
            can_manage_users=granted.can_view_users,
            can_manage_roles=False,
            can_view_users=granted.can_view_users,
            can_edit_users=False,
            can_delete_users=False,
            can_manage_rooms=granted.can_manage_rooms,
            can_manage_bookings=granted.can_manage_bookings,
            can_view_bookings=granted.can_manage_bookings,
            can_edit_bookings=granted.can_manage_bookings,
            can_delete_bookings=False,
            can_access_settings=granted.can_access_settings,
            can_toggle_user_status=False,
            can_manage_staff=granted.can_manage_staff,
        )

    if isinstance(identity, UserIdentity):
        return Permissions(
            can_manage_users=False,
            can_manage_roles=False,
            can_view_users=False,
            can_edit_users=False,
            can_delete_users=False,
            can_manage_rooms=False,
            can_manage_bookings=False,
            can_view_bookings=False,
            can_edit_bookings=False,
            can_delete_bookings=False,
            can_access_settings=False,
            can_toggle_user_status=False,
            can_manage_staff=False,
        )

    raise TypeError(f"Unsupported identity: {type(identity).__name__}")


def permissions_for_profile(profile: Optional[Dict]) -> Permissions:
    return resolve_permissions(identity_from_profile(profile))
