"""Application dependency container."""

from __future__ import annotations

from collections.abc import Callable
from functools import cached_property

from sqlalchemy.orm import Session

from useraccounts.application.services.password_hashing import WerkzeugPasswordHasher
from useraccounts.application.services.token_service import JwtTokenService
from useraccounts.application.use_cases.users.authorize_request import BearerAuthorizer
from useraccounts.application.use_cases.users.delete_user import DeleteUserUseCase
from useraccounts.application.use_cases.users.get_user import GetUserUseCase
from useraccounts.application.use_cases.users.login_user import LoginUserUseCase
from useraccounts.application.use_cases.users.register_user import RegisterUserUseCase
from useraccounts.application.use_cases.users.update_user import UpdateUserUseCase
from useraccounts.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from useraccounts.interfaces.http.controllers.auth_controller import AuthController
from useraccounts.interfaces.http.controllers.users_controller import UsersController
from useraccounts.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig, session_factory: Callable[[], Session]) -> None:
        self._config = config
        self._session_factory = session_factory

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    @cached_property
    def token_service(self) -> JwtTokenService:
        token_config = self._config.token
        return JwtTokenService(
            token_config.secret_key.get_secret_value(),
            algorithm=token_config.algorithm,
            ttl_seconds=token_config.ttl_seconds,
            leeway_seconds=token_config.leeway_seconds,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self._session_factory)

    @cached_property
    def authorizer(self) -> BearerAuthorizer:
        return BearerAuthorizer(tokens=self.token_service)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_use_case=self.login_user_use_case)

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            authorizer=self.authorizer,
            register_use_case=self.register_user_use_case,
            get_use_case=self.get_user_use_case,
            update_use_case=self.update_user_use_case,
            delete_use_case=self.delete_user_use_case,
        )
