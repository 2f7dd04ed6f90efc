from __future__ import annotations

import logging
import threading

import pytest
import responses

import post_now_client
from post_now_client.apis import AuthApi, CommentsApi, FollowApi, LikesApi, NotificationApi, PostsApi, UsersApi
from post_now_client.exceptions import InvalidCredentialsError, ServerError
from post_now_client.registry import ApiClientRegistry, get_api_client, reset_api_client
from post_now_client.storage import AUTH_TOKEN_KEY, LocalStorage

BASE = "https://api.example.com/api"


def _tokens(registry: ApiClientRegistry) -> set[str | None]:
    return {client.configuration.access_token for client in registry.clients()}


def test_registry_builds_one_client_per_resource_group(registry) -> None:
    assert registry.names() == ("auth", "posts", "users", "comments", "likes", "notifications", "follow")
    assert isinstance(registry.auth, AuthApi)
    assert isinstance(registry.posts, PostsApi)
    assert isinstance(registry.users, UsersApi)
    assert isinstance(registry.comments, CommentsApi)
    assert isinstance(registry.likes, LikesApi)
    assert isinstance(registry.notifications, NotificationApi)
    assert isinstance(registry.follow, FollowApi)
    configurations = [client.configuration for client in registry.clients()]
    assert len({id(config) for config in configurations}) == 7
    assert {config.base_path for config in configurations} == {BASE}
    assert _tokens(registry) == {None}


def test_registry_picks_up_stored_token(settings, storage, http) -> None:
    storage.set_item(AUTH_TOKEN_KEY, "persisted")
    registry = ApiClientRegistry(settings=settings, storage=storage, http=http)
    assert registry.get_auth_token() == "persisted"
    assert _tokens(registry) == {"persisted"}
    assert registry.is_authenticated


def test_set_auth_token_updates_storage_and_every_client(registry) -> None:
    registry.set_auth_token("T")
    assert registry.get_auth_token() == "T"
    assert _tokens(registry) == {"T"}


def test_clear_auth_token_empties_storage_and_every_client(registry) -> None:
    registry.set_auth_token("T")
    registry.clear_auth_token()
    assert registry.get_auth_token() is None
    assert _tokens(registry) == {None}
    assert not registry.is_authenticated


def test_both_mutators_keep_configuration_identity(registry) -> None:
    before = {name: client.configuration for name, client in registry.items()}

    registry.set_auth_token("T")
    after_set = {name: client.configuration for name, client in registry.items()}
    registry.clear_auth_token()
    after_clear = {name: client.configuration for name, client in registry.items()}

    for name, config in before.items():
        assert after_set[name] is config
        assert after_clear[name] is config
    assert {config.access_token for config in before.values()} == {None}


def test_external_configuration_reference_sees_new_token(registry) -> None:
    held = registry.posts.configuration
    registry.set_auth_token("fresh")
    assert held.access_token == "fresh"
    registry.clear_auth_token()
    assert held.access_token is None


def test_set_get_clear_sequence_is_repeatable(registry, storage) -> None:
    for _ in range(3):
        registry.set_auth_token("T")
        assert registry.get_auth_token() == "T"
        registry.clear_auth_token()
        assert storage.items == {}
        assert _tokens(registry) == {None}


def test_clear_without_token_is_harmless(registry) -> None:
    registry.clear_auth_token()
    assert registry.get_auth_token() is None


def test_set_auth_token_rejects_empty(registry) -> None:
    with pytest.raises(ValueError):
        registry.set_auth_token("")
    assert registry.get_auth_token() is None


def test_module_set_auth_token_rejects_empty(registry) -> None:
    reset_api_client(registry)
    with pytest.raises(ValueError):
        post_now_client.set_auth_token("")
    assert post_now_client.get_auth_token() is None


def test_clients_without_auth_capability_are_skipped(registry) -> None:
    registry.likes = object()
    registry.set_auth_token("T")
    assert registry.posts.configuration.access_token == "T"
    registry.clear_auth_token()
    assert registry.posts.configuration.access_token is None


def test_mutators_log_without_token_value(registry, caplog) -> None:
    with caplog.at_level("INFO"):
        registry.set_auth_token("very-secret-token")
        registry.clear_auth_token()
    assert "set_auth_token" in caplog.text
    assert "clear_auth_token" in caplog.text
    assert '"clients_updated": 7' in caplog.text
    assert "very-secret-token" not in caplog.text


def test_registry_logger_leaves_handlers_to_the_application(registry) -> None:
    registry.set_auth_token("T")
    assert logging.getLogger("post_now_client.registry").handlers == []
    assert logging.getLogger("post_now_client").handlers == []


def test_token_survives_new_registry_over_same_disk_storage(settings, tmp_path) -> None:
    first = ApiClientRegistry(settings=settings, storage=LocalStorage(directory=tmp_path))
    first.set_auth_token("disk-token")

    second = ApiClientRegistry(settings=settings, storage=LocalStorage(directory=tmp_path))
    assert second.get_auth_token() == "disk-token"
    assert _tokens(second) == {"disk-token"}


def test_corrupt_storage_yields_unauthenticated_registry(settings, tmp_path) -> None:
    (tmp_path / "storage.json").write_text("][")
    registry = ApiClientRegistry(settings=settings, storage=LocalStorage(directory=tmp_path))
    assert registry.get_auth_token() is None
    assert _tokens(registry) == {None}


def test_undecodable_storage_yields_unauthenticated_registry(settings, tmp_path) -> None:
    (tmp_path / "storage.json").write_bytes(b'{"authToken": "\xff\xfe"}')
    registry = ApiClientRegistry(settings=settings, storage=LocalStorage(directory=tmp_path))
    assert registry.get_auth_token() is None
    assert _tokens(registry) == {None}


def test_unusable_storage_directory_does_not_break_construction(settings, tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    registry = ApiClientRegistry(settings=settings, storage=LocalStorage(directory=blocker / "sub"))
    assert registry.get_auth_token() is None
    assert _tokens(registry) == {None}


def test_concurrent_mutators_leave_clients_consistent(registry) -> None:
    def worker(index: int) -> None:
        for round_ in range(25):
            if round_ % 5 == 4:
                registry.clear_auth_token()
            else:
                registry.set_auth_token(f"token-{index}-{round_}")

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert _tokens(registry) == {registry.get_auth_token()}


@responses.activate
def test_requests_carry_the_current_token(registry) -> None:
    responses.add(responses.GET, f"{BASE}/notifications/unread-count", json={"count": 0}, status=200)

    registry.set_auth_token("T")
    registry.notifications.get_unread_count()
    registry.clear_auth_token()
    registry.notifications.get_unread_count()

    assert responses.calls[0].request.headers["Authorization"] == "Bearer T"
    assert "Authorization" not in responses.calls[1].request.headers
    assert responses.calls[0].request.headers["Content-Type"] == "application/json"


@responses.activate
def test_login_stores_token(registry) -> None:
    responses.add(
        responses.POST,
        f"{BASE}/auth/login",
        json={"token": "jwt", "username": "alice", "message": "Login successful"},
        status=200,
    )

    response = registry.login("alice", "secret")

    assert response.username == "alice"
    assert registry.get_auth_token() == "jwt"
    assert _tokens(registry) == {"jwt"}

    registry.logout()
    assert registry.get_auth_token() is None


@responses.activate
def test_failed_login_leaves_token_untouched(registry) -> None:
    registry.set_auth_token("previous")
    responses.add(responses.POST, f"{BASE}/auth/login", json={"error": "Invalid credentials"}, status=400)

    with pytest.raises(InvalidCredentialsError):
        registry.login("alice", "wrong")

    assert registry.get_auth_token() == "previous"


@responses.activate
def test_errors_propagate_from_clients(registry) -> None:
    responses.add(responses.GET, f"{BASE}/posts", json={"message": "boom"}, status=500)
    with pytest.raises(ServerError):
        registry.posts.get_all_posts()


def test_default_registry_uses_env_and_disk(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("POST_NOW_STORAGE_DIR", str(tmp_path))

    client = get_api_client()
    assert client is get_api_client()
    assert client.settings.api_base_url == "http://localhost:8090/api"

    post_now_client.set_auth_token("T")
    assert post_now_client.get_auth_token() == "T"
    assert _tokens(client) == {"T"}
    assert LocalStorage(directory=tmp_path).get_item(AUTH_TOKEN_KEY) == "T"

    post_now_client.clear_auth_token()
    assert post_now_client.get_auth_token() is None
    assert _tokens(client) == {None}


def test_default_registry_honours_base_url_override(monkeypatch) -> None:
    monkeypatch.setenv("POST_NOW_API_URL", "https://prod.example.com/api")
    assert {c.configuration.base_path for c in get_api_client().clients()} == {"https://prod.example.com/api"}


def test_reset_api_client_installs_given_registry(registry) -> None:
    reset_api_client(registry)
    assert get_api_client() is registry
    post_now_client.set_auth_token("T")
    assert registry.get_auth_token() == "T"
