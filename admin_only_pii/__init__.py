# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from .policy.core import PiiGuard, PolicyTable, SiteSettings, Caller
from .policy.sanitizer import sanitize_value, MappingFieldSource, EMPTY_SOURCE

__all__ = ["PiiGuard", "PolicyTable", "SiteSettings", "Caller", "sanitize_value", "MappingFieldSource", "EMPTY_SOURCE"]
