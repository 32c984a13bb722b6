# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from useraccounts.application.use_cases.users.authorize_request import BearerAuthorizer
from useraccounts.application.use_cases.users.delete_user import DeleteUserUseCase
from useraccounts.application.use_cases.users.get_user import GetUserUseCase
from useraccounts.application.use_cases.users.register_user import RegisterUserUseCase
from useraccounts.application.use_cases.users.update_user import UpdateUserUseCase
from useraccounts.domain.users.entities import TokenClaims
from useraccounts.domain.users.exceptions import AuthenticationRequiredError, ForbiddenError
from useraccounts.infrastructure.audit import AuditAction, audit_log
from useraccounts.interfaces.http.dto.users import (
    MessageDTO,
    RegisterRequestDTO,
    UpdateUserRequestDTO,
    UserCreatedDTO,
    UserDTO,
)
from useraccounts.shared.errors.validation import raise_validation_error
from useraccounts.shared.middleware.request_logger import client_ip


class UsersController:
    def __init__(
        self,
        *,
        authorizer: BearerAuthorizer,
        register_use_case: RegisterUserUseCase,
        get_use_case: GetUserUseCase,
        update_use_case: UpdateUserUseCase,
        delete_use_case: DeleteUserUseCase,
    ) -> None:
        self._authorizer = authorizer
        self._register_use_case = register_use_case
        self._get_use_case = get_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def _authorize(self, user_id: int) -> TokenClaims:
        try:
            claims = self._authorizer.authorize(request.headers.get("Authorization"), user_id)
        except (AuthenticationRequiredError, ForbiddenError) as exc:
            audit_log(
                AuditAction.ACCESS_DENIED,
                ip_address=client_ip(),
                details={"target_user_id": user_id, "reason": exc.code},
                success=False,
            )
            raise
        g.user_id = claims.user_id
        return claims

    def create_user(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password, dto.email)

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=client_ip(),
            details={"username": dto.username},
            success=True,
        )
        return jsonify(UserCreatedDTO(id=user.id).model_dump()), 201

    def get_user(self, user_id: int) -> tuple[Response, int]:
        user = self._get_use_case.execute(user_id)
        return jsonify(UserDTO.from_entity(user).model_dump()), 200

    def update_user(self, user_id: int) -> tuple[Response, int]:
        actor = self._authorize(user_id)

        try:
            dto = UpdateUserRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._update_use_case.execute(actor, user_id, dto.to_changes())

        audit_log(
            AuditAction.ACCOUNT_UPDATED,
            user_id=actor.user_id,
            ip_address=client_ip(),
            details={"fields": sorted(dto.model_dump(exclude_none=True))},
            success=True,
        )
        return jsonify(MessageDTO(message="User updated").model_dump()), 200

    def delete_user(self, user_id: int) -> tuple[Response, int]:
        actor = self._authorize(user_id)

        self._delete_use_case.execute(actor, user_id)

        audit_log(
            AuditAction.ACCOUNT_DELETED,
            user_id=actor.user_id,
            ip_address=client_ip(),
            success=True,
        )
        return jsonify(MessageDTO(message="User deleted").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/users")
        bp.add_url_rule("", view_func=self.create_user, methods=["POST"])
        bp.add_url_rule("/<int:user_id>", view_func=self.get_user, methods=["GET"])
        bp.add_url_rule("/<int:user_id>", view_func=self.update_user, methods=["PUT"])
        bp.add_url_rule("/<int:user_id>", view_func=self.delete_user, methods=["DELETE"])
        return bp
