# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from useraccounts.application.use_cases.users.login_user import LoginUserUseCase
from useraccounts.domain.users.exceptions import InvalidCredentialsError
from useraccounts.infrastructure.audit import AuditAction, audit_log
from useraccounts.interfaces.http.dto.auth import LoginRequestDTO, LoginSuccessDTO
from useraccounts.shared.errors.validation import raise_validation_error
from useraccounts.shared.middleware.request_logger import client_ip


class AuthController:
    def __init__(self, *, login_use_case: LoginUserUseCase) -> None:
        self._login_use_case = login_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = client_ip()

        try:
            result = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        g.user_id = result.user_id
        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=result.user_id,
            ip_address=ip_address,
            success=True,
        )

        payload = LoginSuccessDTO(user_id=result.user_id, token=result.token).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
