# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.


class CapabilityChecker:
    """Decides who may see PII unredacted: admins, and nobody else."""

    def is_privileged(self, caller) -> bool:
        if caller is None:
            return False
        return getattr(caller, "admin", False) is True
