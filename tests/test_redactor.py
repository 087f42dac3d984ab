from decimal import Decimal

from admin_only_pii.policy.sanitizer import sanitize_value, MappingFieldSource, EMPTY_SOURCE


def _keys(d):
    out = {}
    for k, v in d.items():
        out[k] = _keys(v) if isinstance(v, dict) else None
    return out


def test_sanitize_value_type_table():
    assert sanitize_value("a@b.com") == "unknown"
    assert sanitize_value("") == "unknown"
    assert sanitize_value(42) == 0
    assert sanitize_value(3.5) == 0
    assert sanitize_value(Decimal("1.5")) == 0
    assert sanitize_value(True) is False
    assert sanitize_value(False) is False
    assert sanitize_value("x", placeholder="hidden") == "hidden"


def test_sanitize_value_other_kinds_become_none():
    assert sanitize_value(None) is None
    assert sanitize_value({"a": 1}) is None
    assert sanitize_value(["a@b.com"]) is None


def test_email_hidden_for_member(guard, member):
    s = {"email": "a@b.com", "username": "bob"}
    out = guard.process(s, member, MappingFieldSource({"email": "a@b.com"}))
    assert out == {"email": "unknown", "username": "bob"}
    assert list(out) == ["email", "username"]


def test_nested_structure_is_walked(guard, member):
    s = {"profile": {"ip_address": "1.2.3.4", "bio": "hi"}}
    out = guard.process(s, member, MappingFieldSource({"ip_address": "1.2.3.4"}))
    assert out == {"profile": {"ip_address": "unknown", "bio": "hi"}}


def test_unsupplied_field_is_dropped(guard, member):
    out = guard.process({"location": "old-cached-value"}, member, EMPTY_SOURCE)
    assert out == {}


def test_privileged_caller_gets_input_back(guard, admin):
    s = {"email": "a@b.com", "profile": {"ip_address": "1.2.3.4"}}
    assert guard.process(s, admin, EMPTY_SOURCE) is s
    assert s == {"email": "a@b.com", "profile": {"ip_address": "1.2.3.4"}}


def test_anonymous_caller_is_redacted(guard):
    out = guard.process({"email": "a@b.com"}, None, MappingFieldSource({"email": "a@b.com"}))
    assert out == {"email": "unknown"}


def test_authoritative_value_comes_from_field_source(guard, member):
    # the structure holds an already-processed value; the source value decides the type
    s = {"ip_address": "n/a", "client_ip": "1.1.1.1", "registration_ip_address": "x"}
    f = MappingFieldSource({"ip_address": 7, "client_ip": True, "registration_ip_address": None})
    out = guard.process(s, member, f)
    assert out == {"ip_address": 0, "client_ip": False, "registration_ip_address": None}


def test_key_set_is_subset_at_every_depth(guard, member):
    s = {
        "id": 3,
        "email": "bob@example.com",
        "location": "Leeds",
        "profile": {"location": "Leeds", "bio": "hi", "deep": {"ip_address": "1.2.3.4", "x": 1}},
    }
    out = guard.process(s, member, MappingFieldSource({"email": "bob@example.com"}))
    assert _keys(out) == {"id": None, "email": None, "profile": {"bio": None, "deep": {"x": None}}}
    assert out["email"] == "unknown"


def test_redaction_is_idempotent(guard, member):
    s = {
        "email": "bob@example.com",
        "secondary_emails": ["b2@example.com"],
        "location": "Leeds",
        "profile": {"ip_address": "1.2.3.4", "bio": "hi"},
    }
    f = MappingFieldSource({"email": "bob@example.com", "secondary_emails": ["b2@example.com"],
                            "ip_address": "1.2.3.4"})
    once = guard.process(s, member, f)
    assert guard.process(once, member, f) == once


def test_lists_of_structures_are_walked(guard, member):
    s = {"tokens": [{"client_ip": "1.2.3.4", "id": 1}, "plain"]}
    out = guard.process(s, member, MappingFieldSource({"client_ip": "1.2.3.4"}))
    assert out == {"tokens": [{"client_ip": "unknown", "id": 1}, "plain"]}


def test_input_is_not_mutated(guard, member):
    s = {"email": "a@b.com", "profile": {"location": "Oslo"}}
    guard.process(s, member, EMPTY_SOURCE)
    assert s == {"email": "a@b.com", "profile": {"location": "Oslo"}}


def test_get_field(guard, admin, moderator):
    assert guard.get_field("email", admin, lambda: "a@b.com") == "a@b.com"
    assert guard.get_field("email", moderator, lambda: "a@b.com") == "unknown"
    assert guard.get_field("email", None, lambda: "a@b.com") == "unknown"
    assert guard.get_field("client_ip", moderator, lambda: 12) == 0
    assert guard.get_field("location", moderator, lambda: True) is False


def test_get_field_leaves_other_fields_alone(guard, member):
    assert guard.get_field("username", member, lambda: "bob") == "bob"
