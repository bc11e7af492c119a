from app import create_app
from models import QueueKind


def test_dashboard_renders(client):
    response = client.get("/")
    assert response.status_code == 200
    assert b"Queue Lab" in response.data
    assert b"queue-compacting" in response.data


def test_enqueue_and_dequeue_via_forms(client, lab):
    response = client.post("/queues/array/enqueue", data={"value": "Josh"})
    assert response.status_code == 302
    client.post("/queues/array/enqueue", data={"value": "Tim"})
    assert lab.queues[QueueKind.ARRAY].to_list() == ["Josh", "Tim"]

    response = client.post("/queues/array/dequeue", follow_redirects=True)
    assert response.status_code == 200
    assert "Josh".encode() in response.data
    assert lab.queues[QueueKind.ARRAY].to_list() == ["Tim"]


def test_unknown_kind_form_redirects(client):
    response = client.post("/queues/stack/enqueue", data={"value": "x"})
    assert response.status_code == 302


def test_enqueue_all_and_reset(client, lab):
    client.post("/queues/all/enqueue", data={"value": "a"})
    assert all(s.count == 1 for s in lab.snapshots())
    client.post("/queues/all/dequeue")
    assert all(s.count == 0 for s in lab.snapshots())
    client.post("/queues/all/enqueue", data={"value": "b"})
    client.post("/reset")
    assert all(s.count == 0 for s in lab.snapshots())


def test_api_list_queues(client):
    response = client.get("/api/queues")
    assert response.status_code == 200
    kinds = [q["kind"] for q in response.get_json()]
    assert kinds == ["array", "compacting", "linked"]


def test_api_enqueue_dequeue(client):
    response = client.post("/api/queues/linked", json={"value": "4"})
    assert response.status_code == 201
    client.post("/api/queues/linked", json={"value": "2"})
    response = client.get("/api/queues/linked")
    body = response.get_json()
    assert body["count"] == 2
    assert body["front"] == "4"

    response = client.delete("/api/queues/linked")
    assert response.status_code == 200
    assert response.get_json()["value"] == "4"
    assert response.get_json()["queue"]["front"] == "2"


def test_api_dequeue_empty_returns_null(client):
    response = client.delete("/api/queues/compacting")
    assert response.status_code == 200
    assert response.get_json()["value"] is None


def test_api_validation(client):
    response = client.post("/api/queues/array", json={})
    assert response.status_code == 400
    response = client.post("/api/queues/array", json={"value": "  "})
    assert response.status_code == 400


def test_api_unknown_kind(client):
    response = client.get("/api/queues/stack")
    assert response.status_code == 404
    assert "error" in response.get_json()
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json()["error"] == "not found"


def test_config_overrides_policy():
    app = create_app({
        "TESTING": True,
        "QUEUE_COMPACT_MIN_LENGTH": 2,
        "QUEUE_COMPACT_MIN_RATIO": 0.1,
    })
    lab = app.extensions["queue_lab"]
    assert lab.policy.min_length == 2
    assert lab.policy.min_ratio == 0.1
    assert lab.history_limit == 50


def test_compacting_internals_in_api(client):
    for x in range(25):
        client.post("/api/queues/compacting", json={"value": str(x)})
    for _ in range(7):
        client.delete("/api/queues/compacting")
    body = client.get("/api/queues/compacting").get_json()
    assert body["head"] == 0
    assert body["compactions"] == 1
    assert body["count"] == 18
    assert body["front"] == "7"


def test_module_level_app():
    import app as app_module

    lab = app_module.app.extensions["queue_lab"]
    assert lab.policy.min_length == 20
    assert app_module.app.test_client().get("/api/queues").status_code == 200
