from texie.credentials import CredentialStore
from texie.models import Credentials
from texie.token_store import MemoryTokenStorage


def test_credentials_unset_by_default(store):
    assert store.credentials is None
    assert store.client_id is None


def test_set_credentials_stores_pair(store):
    store.set_credentials("id", "secret")
    assert store.credentials == Credentials(client_id="id", client_secret="secret")
    assert store.client_id == "id"


def test_set_credentials_overwrites(store):
    store.set_credentials("id-1", "secret-1")
    store.set_credentials("id-2", "secret-2")
    assert store.credentials == Credentials(client_id="id-2", client_secret="secret-2")


def test_access_token_empty_when_never_set(store):
    assert store.get_access_token() == ""


def test_set_access_token_writes_storage(store, storage):
    store.set_access_token("tok")
    assert store.get_access_token() == "tok"
    assert storage.get("access_token") == "tok"


def test_clear_access_token_sets_empty_string(store, storage):
    store.set_access_token("tok")
    store.clear_access_token()
    assert store.get_access_token() == ""
    assert storage.get("access_token") == ""


def test_token_read_from_existing_storage():
    store = CredentialStore(MemoryTokenStorage({"access_token": "persisted"}))
    assert store.get_access_token() == "persisted"


def test_credentials_never_written_to_storage(store, storage):
    store.set_credentials("id", "secret")
    assert storage.get("client_id") is None
    assert storage.get("client_secret") is None
