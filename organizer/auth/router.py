"""
Organizer API - Authentication Router

Endpoints for authentication and account creation.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from organizer.auth.dependencies import get_auth_service
from organizer.auth.schemas import (
    AuthenticateRequest,
    AuthenticateResponse,
    UserCreateRequest,
    UserCreateResponse,
)
from organizer.auth.service import AuthService
from organizer.state.router import get_state_assembler
from organizer.state.service import StateAssembler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post(
    "/authenticate",
    response_model=AuthenticateResponse,
    summary="Login and get access token with session state",
)
async def authenticate(
    request: AuthenticateRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    assembler: Annotated[StateAssembler, Depends(get_state_assembler)],
) -> AuthenticateResponse:
    """
    Authenticate a user and return a JWT access token plus the assembled state.

    Use the returned token in the Authorization header:
    `Authorization: Bearer <token>`
    """
    user = await auth_service.authenticate_user(
        username=request.username,
        password=request.password,
    )

    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = auth_service.create_access_token(user_id=user.id)
    state = await assembler.assemble(user.id)
    return AuthenticateResponse(token=token, state=state)


@router.post(
    "/user/create",
    response_model=UserCreateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new account",
)
async def create_user(
    request: UserCreateRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    assembler: Annotated[StateAssembler, Depends(get_state_assembler)],
) -> UserCreateResponse:
    """
    Create an account together with its default groups.

    A taken name is reported as a 500, which existing clients match on.
    """
    user = await auth_service.register_user(
        username=request.username,
        password=request.password,
    )

    if user is None:
        logger.warning("Account creation refused: name %r already exists", request.username)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="A user with that account name already exists.",
        )

    token = auth_service.create_access_token(user_id=user.id)
    state = await assembler.assemble(user.id)
    return UserCreateResponse(id=user.id, name=user.name, token=token, state=state)
