"""MFA method query specifications."""

from .....core.specifications import Specification, eq
from ..value_objects import MfaType


def mfa_methods_for_user(user_id: str) -> Specification:
    return Specification().where(eq("user_id", user_id)).add_order_by("mfa_type")


def enabled_mfa_methods_for_user(user_id: str) -> Specification:
    return mfa_methods_for_user(user_id).where(eq("is_enabled", True))


def mfa_method_for_user_and_type(user_id: str, mfa_type: MfaType) -> Specification:
    return Specification().where(eq("user_id", user_id)).where(eq("mfa_type", MfaType(mfa_type)))
