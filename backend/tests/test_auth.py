"""Tests de autenticação e das rotas administrativas de usuários."""

import json

import pytest
from fastapi.testclient import TestClient

from conftest import login
from main import create_app
from pcm.exceptions import Conflict, Forbidden, Unauthenticated, Unauthorized
from pcm.models import User, UserRole
from pcm.services import AuthService, Authenticator, EmailTokenAuthenticator


@pytest.fixture
def auth(store):
    return AuthService(store, EmailTokenAuthenticator())


class TestAuthService:
    def test_login_returns_email_token(self, auth):
        user, token = auth.login("carlos@goinn.com", "carlos123")
        assert token == "carlos@goinn.com"
        assert user.public_view() == {"email": "carlos@goinn.com", "role": "user", "nickname": "Carlos"}

    def test_login_wrong_password(self, auth):
        with pytest.raises(Unauthorized):
            auth.login("carlos@goinn.com", "errada")

    def test_register_then_login(self, auth):
        auth.register("nova@goinn.com", "s3nha")
        user, token = auth.login("nova@goinn.com", "s3nha")
        assert token == "nova@goinn.com"
        assert user.role == UserRole.USER
        assert user.display_name == "nova"

    def test_register_twice_conflicts(self, auth, store):
        auth.register("nova@goinn.com", "s3nha")
        count = len(store.users)
        with pytest.raises(Conflict):
            auth.register("nova@goinn.com", "outra")
        assert len(store.users) == count

    def test_authenticate(self, auth):
        with pytest.raises(Unauthenticated):
            auth.authenticate(None)
        with pytest.raises(Forbidden):
            auth.authenticate("ninguem@goinn.com")
        assert auth.authenticate("user@goinn.com").email == "user@goinn.com"

    def test_require_admin(self, auth):
        with pytest.raises(Forbidden):
            AuthService.require_admin(auth.authenticate("user@goinn.com"))
        assert AuthService.require_admin(auth.authenticate("admin@goinn.com")).role == UserRole.ADMIN


class TestAuthRoutes:
    def test_login(self, client):
        response = client.post("/api/auth/login", json={"email": "admin@goinn.com", "senha": "admin123"})
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "user": {"email": "admin@goinn.com", "role": "admin", "nickname": "Administrador"},
            "token": "admin@goinn.com"
        }

    def test_login_invalid(self, client):
        response = client.post("/api/auth/login", json={"email": "admin@goinn.com", "senha": "x"})
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Credenciais inválidas"}

    def test_register(self, client, settings):
        response = client.post("/api/auth/register", json={"email": "maria@goinn.com", "senha": "m"})
        assert response.status_code == 200
        body = response.json()
        assert body["token"] == "maria@goinn.com"
        assert body["user"]["nickname"] == "maria"
        saved = json.loads(settings.users_path.read_text(encoding="utf-8"))
        assert any(u["email"] == "maria@goinn.com" and u["senha"] == "m" for u in saved)
        assert login(client, "maria@goinn.com", "m") == "maria@goinn.com"

    def test_register_missing_fields(self, client):
        response = client.post("/api/auth/register", json={"email": "maria@goinn.com"})
        assert response.status_code == 400
        assert response.json()["error"] == "E-mail e senha são obrigatórios"

    def test_register_duplicate(self, client):
        response = client.post("/api/auth/register", json={"email": "user@goinn.com", "senha": "x"})
        assert response.status_code == 409
        assert response.json()["error"] == "E-mail já cadastrado"


class TestAdminRoutes:
    def test_missing_token(self, client):
        response = client.get("/api/admin/users")
        assert response.status_code == 401
        assert response.json()["error"] == "Token não fornecido"

    def test_unknown_token(self, client):
        response = client.get("/api/admin/users", headers={"Authorization": "ninguem@goinn.com"})
        assert response.status_code == 403
        assert response.json()["error"] == "Token inválido"

    def test_non_admin_is_forbidden(self, client, user_headers):
        response = client.get("/api/admin/users", headers=user_headers)
        assert response.status_code == 403
        assert response.json()["error"] == "Acesso negado"

    def test_list_users_hides_password(self, client, admin_headers):
        body = client.get("/api/admin/users", headers=admin_headers).json()
        assert len(body["data"]) == 4
        for user in body["data"]:
            assert set(user) == {"email", "role", "nickname", "createdAt"}

    def test_create_user(self, client, admin_headers):
        response = client.post(
            "/api/admin/users",
            json={"email": "chefe@goinn.com", "password": "c", "role": "admin"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["user"] == {"email": "chefe@goinn.com", "role": "admin", "nickname": "chefe"}
        assert login(client, "chefe@goinn.com", "c") == "chefe@goinn.com"

    def test_create_user_missing_role(self, client, admin_headers):
        response = client.post(
            "/api/admin/users", json={"email": "a@goinn.com", "password": "c"}, headers=admin_headers
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Todos os campos são obrigatórios"

    def test_create_user_invalid_role(self, client, admin_headers):
        response = client.post(
            "/api/admin/users",
            json={"email": "a@goinn.com", "password": "c", "role": "gerente"},
            headers=admin_headers
        )
        assert response.status_code == 400

    def test_create_user_duplicate(self, client, admin_headers):
        response = client.post(
            "/api/admin/users",
            json={"email": "carlos@goinn.com", "password": "c", "role": "user"},
            headers=admin_headers
        )
        assert response.status_code == 409

    def test_update_nickname(self, client, admin_headers):
        response = client.post(
            "/api/admin/users/update-nickname",
            json={"email": "carlos@goinn.com", "nickname": "Carlão"},
            headers=admin_headers
        )
        assert response.status_code == 200
        assert response.json()["message"] == 'Apelido de carlos@goinn.com atualizado para "Carlão"'
        users = client.get("/api/admin/users", headers=admin_headers).json()["data"]
        assert next(u for u in users if u["email"] == "carlos@goinn.com")["nickname"] == "Carlão"

    def test_update_nickname_unknown_user(self, client, admin_headers):
        response = client.post(
            "/api/admin/users/update-nickname",
            json={"email": "x@goinn.com", "nickname": "X"},
            headers=admin_headers
        )
        assert response.status_code == 404
        assert response.json()["error"] == "Usuário não encontrado"

    def test_update_nickname_requires_admin(self, client, user_headers):
        response = client.post(
            "/api/admin/users/update-nickname",
            json={"email": "carlos@goinn.com", "nickname": "X"},
            headers=user_headers
        )
        assert response.status_code == 403

    def test_delete_user(self, client, admin_headers):
        response = client.delete("/api/admin/users/douglas@goinn.com", headers=admin_headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Usuário douglas@goinn.com removido com sucesso"
        assert client.delete("/api/admin/users/douglas@goinn.com", headers=admin_headers).status_code == 404
        failed = client.post("/api/auth/login", json={"email": "douglas@goinn.com", "senha": "123"})
        assert failed.status_code == 401


class PrefixedTokenAuthenticator(Authenticator):
    def issue_token(self, user: User) -> str:
        return f"tok-{user.email}"

    def resolve(self, token, users):
        return next((u for u in users if f"tok-{u.email}" == token), None)


class TestCustomAuthenticator:
    def test_app_uses_injected_strategy(self, settings):
        with TestClient(create_app(settings, authenticator=PrefixedTokenAuthenticator())) as client:
            token = login(client, "admin@goinn.com", "admin123")
            assert token == "tok-admin@goinn.com"
            assert client.get("/api/admin/users", headers={"Authorization": token}).status_code == 200
            plain = client.get("/api/admin/users", headers={"Authorization": "admin@goinn.com"})
            assert plain.status_code == 403
