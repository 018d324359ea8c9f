"""Sign-up, sign-in and session routes."""

from __future__ import annotations

from flask import g, jsonify, request

from ...auth_guard import login_required, sign_in, sign_out
from ...errors import Unauthenticated
from ...extensions import get_session_factory
from ...logging_config import get_logger
from ...services import auth
from ...validation import bind_payload
from . import bp
from .forms import CredentialsPayload, SignUpPayload

logger = get_logger(__name__)


@bp.post("/sign-up")
def sign_up():
    payload = bind_payload(SignUpPayload, request.get_json(silent=True))
    user = auth.create_user(
        email=payload.email,
        password=payload.password,
        name=payload.name,
        session_factory=get_session_factory(),
    )
    sign_in(user.id)
    return jsonify(user.to_dict()), 201


@bp.post("/sign-in")
def sign_in_route():
    payload = bind_payload(CredentialsPayload, request.get_json(silent=True))
    user = auth.authenticate(
        email=payload.email,
        password=payload.password,
        session_factory=get_session_factory(),
    )
    if user is None:
        raise Unauthenticated("Invalid email or password.")
    sign_in(user.id)
    logger.info("Signed in", extra={"user_id": user.id})
    return jsonify(user.to_dict())


@bp.post("/sign-out")
def sign_out_route():
    sign_out()
    return "", 204


@bp.get("/session")
@login_required
def current_session():
    user = auth.get_user(g.user_id, get_session_factory())
    if user is None:
        sign_out()
        raise Unauthenticated()
    return jsonify(user.to_dict())
