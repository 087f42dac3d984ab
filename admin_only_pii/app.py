# © 2025 Tejas Gajjar. All rights reserved.
# Owner: Tejas Gajjar — Admin-Only PII for Enterprise Integration
# Contact: tejas.gajjar@macys.com | tejgajjar2001@gmail.com
# Note: This module is tailored for serializer-level PII redaction.

from fastapi import FastAPI, HTTPException, Header
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import yaml, os, time

from .policy.core import PiiGuard, Caller
from .policy.logger import log_json
from .policy.reports import visible_reports, can_view_emails
from .policy.serializers import Scope, get_serializer, current_user_payload
from .infra.tracing import init_tracing, get_tracer, annotate_serialization

# Load policies
POLICY_PATH = os.environ.get("POLICY_PATH", os.path.join(os.path.dirname(__file__), "policy/policies.yaml"))
with open(POLICY_PATH, "r") as f:
    POLICIES = yaml.safe_load(f) or {}

# Load config
CFG_PATH = os.environ.get("APP_CONFIG", os.path.join(os.path.dirname(__file__), "../config.example.yaml"))
with open(CFG_PATH, "r") as f:
    APP_CONFIG = yaml.safe_load(f) or {}

class UserRecord(BaseModel):
    id: int
    username: str
    name: str = ""
    admin: bool = False
    moderator: bool = False
    email: Optional[str] = None
    secondary_emails: List[str] = Field(default_factory=list)
    ip_address: Optional[str] = None
    registration_ip_address: Optional[str] = None
    post_count: int = 0
    trust_level: int = 0
    active: bool = True
    profile: Dict[str, Any] = Field(default_factory=dict)

class AuthTokenRecord(BaseModel):
    id: int
    user_id: int
    client_ip: Optional[str] = None
    location: Optional[str] = None
    seen_at: Optional[str] = None
    is_active: bool = True

class HostConfig(BaseModel):
    users: List[UserRecord] = Field(default_factory=list)
    auth_tokens: List[AuthTokenRecord] = Field(default_factory=list)
    reports: List[str] = Field(default_factory=list)

HOST = HostConfig.model_validate(APP_CONFIG)
USERS: Dict[int, UserRecord] = {u.id: u for u in HOST.users}

# Init tracing
init_tracing(service_name="admin-only-pii")

guard = PiiGuard(POLICIES)

app = FastAPI(title="Admin-Only PII")

def _caller(user_id: Optional[str]) -> Optional[Caller]:
    if not user_id:
        return None
    try:
        u = USERS.get(int(user_id))
    except ValueError:
        return None
    if u is None:
        return None
    return Caller(id=u.id, username=u.username, admin=u.admin, moderator=u.moderator)

def _user(user_id: int) -> UserRecord:
    u = USERS.get(user_id)
    if u is None:
        raise HTTPException(status_code=404, detail=f"user {user_id} not found")
    return u

def _serialize(kind: str, obj: Dict[str, Any], caller: Optional[Caller]) -> Dict[str, Any]:
    tracer = get_tracer("host.serialize")
    with tracer.start_as_current_span(kind) as span:
        raw = get_serializer(kind)(obj, Scope(user=caller))
        s = guard.protect(raw)
        annotate_serialization(span, kind, guard.can_see_pii(caller), s is not raw)
        return s.attributes()

@app.get("/health")
def health():
    return {"status": "ok", "time": int(time.time())}

@app.get("/session/current")
def session_current(x_user_id: Optional[str] = Header(default=None)):
    caller = _caller(x_user_id)
    if caller is None:
        return {"current_user": None}
    return {"current_user": current_user_payload(caller, guard)}

@app.get("/admin/users")
def admin_users(x_user_id: Optional[str] = Header(default=None)):
    caller = _caller(x_user_id)
    try:
        users = [_serialize("AdminUserListSerializer", u.model_dump(), caller) for u in USERS.values()]
        return {"users": users}
    except Exception as e:
        log_json(guard.table, level="error", msg="admin_users_failed", error=str(e))
        raise HTTPException(status_code=500, detail=str(e))

@app.get("/admin/users/{user_id}")
def admin_user(user_id: int, x_user_id: Optional[str] = Header(default=None)):
    u = _user(user_id)
    return {"user": _serialize("AdminUserSerializer", u.model_dump(), _caller(x_user_id))}

@app.get("/admin/users/{user_id}/email")
def admin_user_email(user_id: int, x_user_id: Optional[str] = Header(default=None)):
    caller = _caller(x_user_id)
    u = _user(user_id)
    if not can_view_emails(caller, guard.settings):
        log_json(guard.table, level="warning", msg="email_view_denied", user_id=user_id, caller=getattr(caller, "id", None))
        raise HTTPException(status_code=403, detail="not allowed to view emails")
    s = guard.protect(get_serializer("AdminUserSerializer")(u.model_dump(), Scope(user=caller)))
    return {"email": s.email(), "secondary_emails": s.secondary_emails()}

@app.get("/u/{username}/card")
def user_card(username: str, x_user_id: Optional[str] = Header(default=None)):
    u = next((u for u in USERS.values() if u.username == username), None)
    if u is None:
        raise HTTPException(status_code=404, detail=f"user {username} not found")
    return {"user": _serialize("UserCardSerializer", u.model_dump(), _caller(x_user_id))}

@app.get("/session/tokens/{user_id}")
def user_tokens(user_id: int, x_user_id: Optional[str] = Header(default=None)):
    _user(user_id)
    caller = _caller(x_user_id)
    tokens = [t for t in HOST.auth_tokens if t.user_id == user_id]
    return {"tokens": [_serialize("UserAuthTokenSerializer", t.model_dump(), caller) for t in tokens]}

@app.get("/admin/reports")
def admin_reports(x_user_id: Optional[str] = Header(default=None)):
    caller = _caller(x_user_id)
    return {"reports": visible_reports(HOST.reports, caller, guard)}
