# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

import json, sys, time


def _scrub(rec, policy_table=None):
    # Imported lazily: core imports this module at load time.
    from .capability import CapabilityChecker
    from .core import PolicyTable
    from .sanitizer import Redactor, EMPTY_SOURCE
    table = policy_table if policy_table is not None else PolicyTable()
    return Redactor(table, CapabilityChecker()).process(rec, None, EMPTY_SOURCE)


def log_json(policy_table=None, **kwargs):
    rec = {"ts": int(time.time()*1000)}
    rec.update(kwargs)
    safe = _scrub(rec, policy_table)
    sys.stdout.write(json.dumps(safe, default=str) + "\n")
    sys.stdout.flush()
