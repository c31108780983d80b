from fastapi import APIRouter, Depends

from app.api.v1.errors import http_errors
from app.api.v1.schemas import (
    AuthResponseSchema,
    CurrentUserResponseSchema,
    LoginRequestSchema,
    RegisterRequestSchema,
    TokenResponseSchema,
    UserDetailSchema,
    UserSchema,
    VerifiedUserResponseSchema,
)
from app.application.use_cases.auth import AuthUseCase
from app.domain.entities.user import User
from app.wiring.dependencies import get_auth_use_case, get_current_user

router = APIRouter()


@router.post("/register", response_model=AuthResponseSchema, status_code=201)
def register(
    req: RegisterRequestSchema,
    uc: AuthUseCase = Depends(get_auth_use_case),
):
    with http_errors():
        result = uc.register(name=req.name, email=req.email, phone=req.phone, password=req.password)
    return AuthResponseSchema(
        message="User registered successfully",
        user=UserSchema.from_user(result.user),
        token=result.token,
    )


@router.post("/login", response_model=AuthResponseSchema)
def login(
    req: LoginRequestSchema,
    uc: AuthUseCase = Depends(get_auth_use_case),
):
    with http_errors():
        result = uc.login(email=req.email, password=req.password)
    return AuthResponseSchema(
        message="Login successful",
        user=UserSchema.from_user(result.user),
        token=result.token,
    )


@router.get("/share-link", response_model=TokenResponseSchema)
def share_link(
    user: User = Depends(get_current_user),
    uc: AuthUseCase = Depends(get_auth_use_case),
):
    return TokenResponseSchema(
        message="Share link generated successfully",
        token=uc.generate_share_token(user.id),
    )


@router.get("/verify-token/{token}", response_model=VerifiedUserResponseSchema)
def verify_token(
    token: str,
    uc: AuthUseCase = Depends(get_auth_use_case),
):
    with http_errors():
        user = uc.verify_share_token(token)
    return VerifiedUserResponseSchema(message="Token verified successfully", user=UserSchema.from_user(user))


@router.get("/me", response_model=CurrentUserResponseSchema)
def me(
    user: User = Depends(get_current_user),
    uc: AuthUseCase = Depends(get_auth_use_case),
):
    with http_errors():
        current = uc.get_current_user(user.id)
    return CurrentUserResponseSchema(user=UserDetailSchema.from_user(current))
