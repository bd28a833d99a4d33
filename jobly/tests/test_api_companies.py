from __future__ import annotations

NEW_COMPANY = {
    "handle": "new",
    "name": "New",
    "description": "DescNew",
    "numEmployees": 10,
    "logoUrl": "http://new.img",
}


def test_create_company(client, seeded):
    res = client.post("/companies", json=NEW_COMPANY)
    assert res.status_code == 201
    assert res.json() == {"company": NEW_COMPANY}


def test_create_company_duplicate(client, seeded):
    res = client.post("/companies", json={**NEW_COMPANY, "handle": "c1", "name": "Other"})
    assert res.status_code == 400
    assert res.json()["detail"] == "Duplicate company: c1"


def test_create_company_bad_handle(client, seeded):
    assert client.post("/companies", json={**NEW_COMPANY, "handle": "Upper"}).status_code == 422


def test_list_companies(client, seeded):
    res = client.get("/companies")
    assert [c["handle"] for c in res.json()["companies"]] == ["c1", "c2", "c3"]


def test_get_company_with_jobs(client, seeded):
    res = client.get("/companies/c1")
    assert res.status_code == 200
    company = res.json()["company"]
    assert company["handle"] == "c1"
    assert company["jobs"] == [{"id": seeded[0], "title": "j1", "salary": 100000, "equity": "0"}]


def test_get_company_not_found(client, seeded):
    assert client.get("/companies/nope").status_code == 404


def test_update_company(client, seeded):
    res = client.patch("/companies/c1", json={"name": "C1-new", "numEmployees": 5})
    assert res.status_code == 200
    company = res.json()["company"]
    assert company["name"] == "C1-new"
    assert company["numEmployees"] == 5
    assert company["description"] == "Desc1"


def test_update_company_errors(client, seeded):
    assert client.patch("/companies/nope", json={"name": "x"}).status_code == 404
    assert client.patch("/companies/c1", json={}).status_code == 400
    assert client.patch("/companies/c1", json={"handle": "c1-new"}).status_code == 422


def test_delete_company(client, seeded):
    res = client.delete("/companies/c1")
    assert res.json() == {"deleted": "c1"}
    assert client.get(f"/jobs/{seeded[0]}").status_code == 404
    assert client.delete("/companies/c1").status_code == 404


def test_delete_company_storage_failure(client, seeded, monkeypatch):
    import sqlite3
    from jobly.routes import companies as companies_routes

    def _locked(handle, log):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(companies_routes, "remove_company", _locked)
    res = client.delete("/companies/c1")
    assert res.status_code == 500

    logged = client.get("/api/logs/search", params={"action": "DELETE_COMPANY"}).json()["items"][0]
    assert logged["result"] == "ERROR"
    assert logged["err_msg"] == "database is locked"
    assert client.get("/companies/c1").status_code == 200
