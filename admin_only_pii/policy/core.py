# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional

from .capability import CapabilityChecker
from .sanitizer import Redactor, DEFAULT_PLACEHOLDER
from .serializers import ProtectedSerializer
from .logger import log_json

DEFAULT_SENSITIVE_FIELDS = frozenset([
    "ip_address", "registration_ip_address", "client_ip", "location", "email", "secondary_emails",
])
DEFAULT_STRUCTURE_KINDS = frozenset([
    "AdminUserSerializer", "AdminUserListSerializer", "UserAuthTokenSerializer", "UserCardSerializer",
])
DEFAULT_HIDDEN_REPORTS = frozenset(["suspicious_logins"])


def _str_set(value, default: FrozenSet[str]) -> FrozenSet[str]:
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(x) for x in value)
    return default


def _section(policies, key: str) -> Dict[str, Any]:
    section = policies.get(key) if isinstance(policies, dict) else None
    return section if isinstance(section, dict) else {}


@dataclass(frozen=True)
class Caller:
    id: Optional[int] = None
    username: str = ""
    admin: bool = False
    moderator: bool = False


@dataclass(frozen=True)
class PolicyTable:
    sensitive_fields: FrozenSet[str] = DEFAULT_SENSITIVE_FIELDS
    hidden_reports: FrozenSet[str] = DEFAULT_HIDDEN_REPORTS
    structure_kinds: FrozenSet[str] = DEFAULT_STRUCTURE_KINDS
    placeholder: str = DEFAULT_PLACEHOLDER

    @classmethod
    def from_policies(cls, policies: Optional[Dict[str, Any]]) -> "PolicyTable":
        pp = _section(policies, "pii_policy")
        rp = _section(policies, "reports")
        placeholder = pp.get("placeholder")
        if not isinstance(placeholder, str) or not placeholder.strip():
            placeholder = DEFAULT_PLACEHOLDER
        return cls(
            sensitive_fields=_str_set(pp.get("sensitive_fields"), DEFAULT_SENSITIVE_FIELDS),
            hidden_reports=_str_set(rp.get("hidden"), DEFAULT_HIDDEN_REPORTS),
            structure_kinds=_str_set(pp.get("structure_kinds"), DEFAULT_STRUCTURE_KINDS),
            placeholder=placeholder,
        )


@dataclass(frozen=True)
class SiteSettings:
    moderators_view_emails: bool = False
    dashboard_hidden_reports: str = ""

    @classmethod
    def from_policies(cls, policies: Optional[Dict[str, Any]], table: PolicyTable) -> "SiteSettings":
        ss = _section(policies, "site_settings")
        return cls(
            moderators_view_emails=ss.get("moderators_view_emails") is True,
            dashboard_hidden_reports="|".join(sorted(table.hidden_reports)),
        )


class PiiGuard:
    """Entry point a host binds to.

    Built once at startup from the policies document; after that it only reads
    its frozen ``table`` and ``settings``.
    """

    def __init__(self, policies: Optional[Dict[str, Any]] = None):
        self.table = PolicyTable.from_policies(policies)
        self.settings = SiteSettings.from_policies(policies, self.table)
        self.checker = CapabilityChecker()
        self.redactor = Redactor(self.table, self.checker)
        log_json(self.table, level="info", msg="policy_loaded",
                 sensitive_fields=sorted(self.table.sensitive_fields),
                 structure_kinds=sorted(self.table.structure_kinds))
        log_json(self.table, level="info", msg="reports_hidden", reports=self.settings.dashboard_hidden_reports,
                 moderators_view_emails=self.settings.moderators_view_emails)

    def can_see_pii(self, caller) -> bool:
        return self.checker.is_privileged(caller)

    def process(self, structure: Mapping[str, Any], caller, field_source) -> Mapping[str, Any]:
        return self.redactor.process(structure, caller, field_source)

    def get_field(self, name: str, caller, accessor: Callable[[], Any]):
        return self.redactor.get_field(name, caller, accessor)

    def protect(self, serializer):
        if serializer.kind not in self.table.structure_kinds:
            return serializer
        return ProtectedSerializer(serializer, self)
