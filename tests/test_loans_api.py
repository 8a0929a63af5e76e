from __future__ import annotations


def test_loan_datasets_start_empty(client):
    assert client.get("/api/kccdata").json() == []
    assert client.get("/api/kccahdata").json() == []


def test_overwrite_round_trips_exact_payload(client):
    payload = {"farmers": [{"name": "Selvi", "limit": 150000}], "year": 2024}
    resp = client.post("/api/kccdata", json=payload)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Data overwritten successfully."}
    assert client.get("/api/kccdata").json() == payload


def test_overwrite_discards_previous_content(client):
    client.post("/api/kccahdata", json=[{"a": 1}, {"b": 2}])
    client.post("/api/kccahdata", json=[{"c": 3}])
    assert client.get("/api/kccahdata").json() == [{"c": 3}]


def test_datasets_are_independent(client):
    client.post("/api/kccdata", json=["kcc"])
    client.post("/api/kccahdata", json=["kccah"])
    assert client.get("/api/kccdata").json() == ["kcc"]
    assert client.get("/api/kccahdata").json() == ["kccah"]


def test_unreadable_dataset_is_500(client, data_dir):
    (data_dir / "kccdata.json").write_text("not json", encoding="utf-8")
    resp = client.get("/api/kccdata")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Error reading data"}

    # a write replaces the broken file
    assert client.post("/api/kccdata", json={"ok": True}).status_code == 201
    assert client.get("/api/kccdata").json() == {"ok": True}


def test_overwrite_without_body_stores_empty_object(client):
    client.post("/api/kccdata", json=[{"a": 1}])
    resp = client.post("/api/kccdata")
    assert resp.status_code == 201
    assert client.get("/api/kccdata").json() == {}
