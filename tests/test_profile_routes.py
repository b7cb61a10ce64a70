"""
Tests for reading and editing profiles.
"""

from models import User


class TestGetProfile:
    def test_any_user_can_read_a_profile(self, client, register):
        ana, _ = register()
        _, bruno_headers = register(email="bruno@example.com", username="bruno")

        response = client.get(f"/api/profile/{ana['id']}", headers=bruno_headers)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == ana["id"]
        assert user["username"] == "ana"
        assert user["birthDate"]
        assert user["bio"] is None
        assert user["avatarUrl"] is None
        assert "password" not in user

    def test_unknown_profile_is_not_found(self, client, register):
        _, headers = register()

        response = client.get("/api/profile/9999", headers=headers)

        assert response.status_code == 404
        assert response.json() == {"error": "Usuário não encontrado"}

    def test_requires_token(self, client, register):
        ana, _ = register()
        assert client.get(f"/api/profile/{ana['id']}").status_code == 401


class TestUpdateProfile:
    def test_owner_can_update(self, client, register):
        ana, headers = register()

        response = client.put(
            f"/api/profile/{ana['id']}",
            json={"bio": "Olá!", "avatarUrl": "https://example.com/ana.png"},
            headers=headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Perfil atualizado com sucesso"
        assert body["user"]["bio"] == "Olá!"
        assert body["user"]["avatarUrl"] == "https://example.com/ana.png"
        assert body["user"]["email"] == "ana@example.com"

    def test_update_is_a_full_overwrite(self, client, register):
        ana, headers = register()
        client.put(
            f"/api/profile/{ana['id']}",
            json={"bio": "Olá!", "avatarUrl": "https://example.com/ana.png"},
            headers=headers,
        )

        response = client.put(f"/api/profile/{ana['id']}", json={"bio": "Nova bio"}, headers=headers)

        assert response.json()["user"]["bio"] == "Nova bio"
        assert response.json()["user"]["avatarUrl"] is None

    def test_other_user_is_forbidden_and_row_unchanged(self, client, register, database):
        ana, _ = register()
        _, bruno_headers = register(email="bruno@example.com", username="bruno")

        response = client.put(
            f"/api/profile/{ana['id']}",
            json={"bio": "hackeado", "avatarUrl": "https://evil.test/x.png"},
            headers=bruno_headers,
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Acesso negado"}

        session = database.session()
        try:
            user = session.query(User).filter(User.id == ana["id"]).one()
            assert user.bio is None
            assert user.avatar_url is None
        finally:
            session.close()

    def test_other_fields_are_not_editable(self, client, register):
        ana, headers = register()

        response = client.put(
            f"/api/profile/{ana['id']}",
            json={"bio": "Olá!", "username": "outra", "email": "x@example.com"},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["user"]["username"] == "ana"
        assert response.json()["user"]["email"] == "ana@example.com"
