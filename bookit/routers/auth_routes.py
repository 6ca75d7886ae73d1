# bookit/routers/auth_routes.py

import logging

from fastapi import APIRouter

from bookit.auth import create_access_token
from bookit.ids import generate_id
from bookit.schemas import AuthResponse, LoginRequest, PublicUser, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["auth"],
)


@router.post("/signup", response_model=AuthResponse)
def signup(body: SignupRequest):
    # No storage here: the client keeps the user record
    user = PublicUser(
        id=generate_id("user"),
        name=body.name,
        email=body.email,
        role=body.role,
    )
    token = create_access_token(user.model_dump(mode="json"))
    logger.info("Issued signup token for %s (%s)", user.id, user.role.value)
    return {"token": token, "user": user, "message": "Signup successful"}


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest):
    # The client has already checked the password against its own store;
    # a token is issued for the identity it sends.
    user = PublicUser(id=body.id, name=body.name, email=body.email, role=body.role)
    token = create_access_token(user.model_dump(mode="json"))
    logger.info("Issued login token for %s", user.id)
    return {"token": token, "user": user, "message": "Login successful"}
