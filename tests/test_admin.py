from sqlalchemy import select

from backend.app.models import Client

NEW_CLIENT = {"clientId": "acme", "apiKey": "write-1", "readToken": "read-1"}


def _clients(app):
    db = app.state.database.session()
    try:
        return db.scalars(select(Client)).all()
    finally:
        db.close()


def test_add_client(client, app):
    response = client.post("/admin/add-client", json=NEW_CLIENT)
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Client added"}

    rows = _clients(app)
    assert [(c.id, c.api_key, c.read_token) for c in rows] == [("acme", "write-1", "read-1")]


def test_new_client_can_ingest_and_read(client):
    client.post("/admin/add-client", json=NEW_CLIENT)
    write = {"X-Client-ID": "acme", "X-API-Key": "write-1"}
    read = {"X-Client-ID": "acme", "Authorization": "Bearer read-1"}

    assert client.post("/ingest/branches", json={"data": [{"id": "b1", "name": "HQ"}]}, headers=write).status_code == 200
    assert client.get("/branches", headers=read).json() == [{"id": "b1", "name": "HQ"}]


def test_duplicate_client_rejected_by_default(client, app):
    client.post("/admin/add-client", json=NEW_CLIENT)
    response = client.post("/admin/add-client", json={**NEW_CLIENT, "apiKey": "hijack"})

    assert response.status_code == 409
    assert "already exists" in response.json()["error"]
    assert [c.api_key for c in _clients(app)] == ["write-1"]


def test_duplicate_client_ignored_when_configured(build_client):
    c = build_client(duplicate_client_policy="ignore")
    c.post("/admin/add-client", json=NEW_CLIENT)
    response = c.post("/admin/add-client", json={**NEW_CLIENT, "apiKey": "hijack"})

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    # Original credentials still work, the resubmitted ones do not
    assert c.post("/ingest/branches", json={"data": []}, headers={"X-Client-ID": "acme", "X-API-Key": "write-1"}).status_code == 200
    assert c.post("/ingest/branches", json={"data": []}, headers={"X-Client-ID": "acme", "X-API-Key": "hijack"}).status_code == 401


def test_missing_fields_are_400(client):
    response = client.post("/admin/add-client", json={"clientId": "acme", "apiKey": "k"})
    assert response.status_code == 400
    assert "readToken" in response.json()["error"]


def test_empty_client_id_is_400(client):
    response = client.post("/admin/add-client", json={**NEW_CLIENT, "clientId": ""})
    assert response.status_code == 400


def test_admin_token_required_when_configured(build_client):
    c = build_client(admin_token="s3cret")

    assert c.post("/admin/add-client", json=NEW_CLIENT).status_code == 401
    assert c.post("/admin/add-client", json=NEW_CLIENT, headers={"X-Admin-Token": "wrong"}).status_code == 401
    response = c.post("/admin/add-client", json=NEW_CLIENT, headers={"X-Admin-Token": "s3cret"})
    assert response.status_code == 200
