"""
Permission models - stored staff grants, caller identities and the
resolved capability record
"""
from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union


class StoredPermissions(BaseModel):
    """Permission grants persisted on a staff profile"""
    can_view_users: bool = False
    can_manage_rooms: bool = False
    can_manage_bookings: bool = False
    can_access_settings: bool = False
    can_manage_staff: bool = False


class Permissions(BaseModel):
    """Capability flags consumed by route guards and the dashboard UI.

    No field has a default: every resolver branch must set all of them.
    """
    can_manage_users: bool
    can_manage_roles: bool
    can_view_users: bool
    can_edit_users: bool
    can_delete_users: bool
    can_manage_rooms: bool
    can_manage_bookings: bool
    can_view_bookings: bool
    can_edit_bookings: bool
    can_delete_bookings: bool
    can_access_settings: bool
    can_toggle_user_status: bool
    can_manage_staff: bool


PermissionFlag = Literal[
    "can_manage_users",
    "can_manage_roles",
    "can_view_users",
    "can_edit_users",
    "can_delete_users",
    "can_manage_rooms",
    "can_manage_bookings",
    "can_view_bookings",
    "can_edit_bookings",
    "can_delete_bookings",
    "can_access_settings",
    "can_toggle_user_status",
    "can_manage_staff",
]


class AdminIdentity(BaseModel):
    role: Literal["admin"] = "admin"


class StaffIdentity(BaseModel):
    role: Literal["staff"] = "staff"
    permissions: StoredPermissions = Field(default_factory=StoredPermissions)


class UserIdentity(BaseModel):
    """Guest accounts and anonymous callers"""
    role: Literal["user"] = "user"


Identity = Annotated[
    Union[AdminIdentity, StaffIdentity, UserIdentity],
    Field(discriminator="role"),
]
