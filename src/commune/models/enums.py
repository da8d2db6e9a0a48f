"""Shared enums for models."""

from enum import Enum


class Role(str, Enum):
    """Principal role. Ordered from most to least privileged."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MANAGER = "manager"
    TENANT = "tenant"


class PrincipalStatus(str, Enum):
    """Account status. Only active principals may authenticate."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class OtpPurpose(str, Enum):
    """Why a one-time code was issued."""

    LOGIN = "login"
    RESEND = "resend"


class AgreementStatus(str, Enum):
    """Tenancy agreement lifecycle."""

    PENDING = "pending"
    EXECUTED = "executed"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class BuildingStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNDER_CONSTRUCTION = "under_construction"


class ResourceType(str, Enum):
    """Resource types known to the authorization layer.

    Only building, maintenance, tenant and complaint have manager/tenant
    rules; every other member is reachable by super_admin/admin only.
    """

    BUILDING = "building"
    MAINTENANCE = "maintenance"
    TENANT = "tenant"
    COMPLAINT = "complaint"
    USER_MANAGEMENT = "user_management"
    ANNOUNCEMENT = "announcement"
    LEAD = "lead"
    PAYMENT = "payment"
    REPORT = "report"


class Operation(str, Enum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
