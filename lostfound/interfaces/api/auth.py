"""Auth API routes: login, register."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from lostfound.interfaces.deps import get_account_repository
from lostfound.domain.repositories.account_repository import AccountRepository
from lostfound.application.services.auth_service import login as login_account, register_account
from lostfound.domain.schemas.auth import LoginRequest, LoginResponse, RegisterRequest

router = APIRouter(tags=["Auth"])


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, repo: AccountRepository = Depends(get_account_repository)):
    return login_account(repo, body)


@router.post("/register", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: AccountRepository = Depends(get_account_repository)):
    register_account(repo, body)
    return "User registered successfully!"
