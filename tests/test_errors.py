"""
Tests for the error taxonomy.
"""

import pytest
from fastapi.testclient import TestClient

from errors import (
    Conflict, Forbidden, InternalError, InvalidCredentials, NotFound, Unauthenticated, ValidationError
)


@pytest.mark.parametrize("error_class, status_code", [
    (ValidationError, 400),
    (Conflict, 400),
    (InvalidCredentials, 400),
    (Unauthenticated, 401),
    (Forbidden, 403),
    (NotFound, 404),
    (InternalError, 500),
])
def test_status_codes(error_class, status_code):
    assert error_class().status_code == status_code


def test_default_and_custom_messages():
    assert InternalError().detail == "Erro interno do servidor"
    assert NotFound("Tópico não encontrado").detail == "Tópico não encontrado"


def test_unexpected_error_returns_internal_error_body(app):
    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro interno do servidor"}
