# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from typing import Iterable, List


def visible_reports(report_names: Iterable[str], caller, guard) -> List[str]:
    names = [str(n) for n in report_names]
    if guard.can_see_pii(caller):
        return names
    return [n for n in names if n not in guard.table.hidden_reports]


def can_view_emails(caller, settings) -> bool:
    if caller is None:
        return False
    if getattr(caller, "admin", False) is True:
        return True
    return getattr(caller, "moderator", False) is True and settings.moderators_view_emails
