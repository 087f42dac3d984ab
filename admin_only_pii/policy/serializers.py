# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Tuple

# Registry
_SERIALIZER_REGISTRY: Dict[str, type] = {}


def serializer(kind: str):
    def deco(cls):
        cls.kind = kind
        _SERIALIZER_REGISTRY[kind] = cls
        return cls
    return deco


def get_serializer(kind: str) -> type:
    if kind not in _SERIALIZER_REGISTRY:
        raise KeyError(f"Unknown serializer: {kind}")
    return _SERIALIZER_REGISTRY[kind]


@dataclass
class Scope:
    user: Any = None


class Serializer:
    """Turns an object into a plain dict of ``fields``.

    A field is read from a same-named method on the serializer when one
    exists, otherwise from the object (mapping key or attribute).
    """

    kind = "Serializer"
    fields: Tuple[str, ...] = ()

    def __init__(self, obj, scope: Optional[Scope] = None):
        self.object = obj
        self.scope = scope or Scope()

    def _read_object(self, name: str):
        if isinstance(self.object, dict):
            return self.object.get(name)
        return getattr(self.object, name, None)

    def accessor(self, name: str) -> Optional[Callable[[], Any]]:
        fn = getattr(type(self), name, None)
        if callable(fn):
            return getattr(self, name)
        return None

    def attributes(self) -> Dict[str, Any]:
        out = {}
        for name in self.fields:
            fn = self.accessor(name)
            out[name] = fn() if fn is not None else self._read_object(name)
        return out


class SerializerFieldSource:
    """Authoritative values from the accessors a serializer declares."""

    def __init__(self, inner: Serializer, accessors: Iterable[str]):
        self.inner = inner
        self.accessors = frozenset(accessors)

    def supplies(self, name: str) -> bool:
        return name in self.accessors

    def get(self, name: str):
        return self.inner.accessor(name)()


class ProtectedSerializer:
    def __init__(self, inner: Serializer, guard):
        self.inner = inner
        self.guard = guard
        self.pii_accessors: FrozenSet[str] = frozenset(
            f for f in guard.table.sensitive_fields if inner.accessor(f) is not None
        )

    @property
    def kind(self) -> str:
        return self.inner.kind

    @property
    def caller(self):
        return self.inner.scope.user

    def attributes(self) -> Dict[str, Any]:
        source = SerializerFieldSource(self.inner, self.pii_accessors)
        return self.guard.process(self.inner.attributes(), self.caller, source)

    def read(self, name: str):
        fn = self.inner.accessor(name)
        if fn is None:
            raise AttributeError(name)
        return self.guard.get_field(name, self.caller, fn)

    def __getattr__(self, name: str):
        # only reached before __init__ has run, e.g. on copies
        if name in ("inner", "guard", "pii_accessors") or name.startswith("__"):
            raise AttributeError(name)
        if name in self.pii_accessors:
            return lambda: self.read(name)
        return getattr(self.inner, name)


def current_user_payload(user, guard) -> Dict[str, Any]:
    return {
        "id": getattr(user, "id", None),
        "username": getattr(user, "username", ""),
        "admin": getattr(user, "admin", False) is True,
        "moderator": getattr(user, "moderator", False) is True,
        "can_see_pii": guard.can_see_pii(user),
    }


@serializer("AdminUserListSerializer")
class AdminUserListSerializer(Serializer):
    fields = ("id", "username", "email", "secondary_emails", "ip_address", "registration_ip_address",
              "admin", "moderator", "post_count", "trust_level", "active")

    def email(self):
        return self._read_object("email")

    def secondary_emails(self):
        return self._read_object("secondary_emails") or []

    def ip_address(self):
        return self._read_object("ip_address")

    def registration_ip_address(self):
        return self._read_object("registration_ip_address")


@serializer("AdminUserSerializer")
class AdminUserSerializer(AdminUserListSerializer):
    fields = AdminUserListSerializer.fields + ("profile",)

    def profile(self):
        return dict(self._read_object("profile") or {})


@serializer("UserCardSerializer")
class UserCardSerializer(Serializer):
    # location has no accessor, so it is dropped for non-admins
    fields = ("id", "username", "name", "location", "profile")

    def profile(self):
        return dict(self._read_object("profile") or {})


@serializer("UserAuthTokenSerializer")
class UserAuthTokenSerializer(Serializer):
    fields = ("id", "client_ip", "location", "seen_at", "is_active")

    def client_ip(self):
        return self._read_object("client_ip")

    def location(self):
        return self._read_object("location")
