def test_defaults_when_nothing_saved(client):
    r = client.get("/constant-info")
    assert r.status_code == 200
    data = r.json()
    assert data["daily_times"]["sunrise_visible"] is True
    assert data["daily_times"]["alos_hashachar"] is False
    assert data["daily_study"]["daf_yomi"] is True
    assert len(data["daily_times"]) == 22


def test_save_overrides_defaults(client):
    r = client.put("/constant-info", json={
        "daily_times": {"alos_hashachar": True, "sunrise_visible": False},
        "daily_study": {"daf_yomi": False, "rambam_yomi": True},
    })
    assert r.status_code == 200
    data = client.get("/constant-info").json()
    assert data["daily_times"]["alos_hashachar"] is True
    assert data["daily_times"]["sunrise_visible"] is False
    # untouched keys keep their defaults
    assert data["daily_times"]["tzeit"] is True
    assert data["daily_study"]["rambam_yomi"] is True

    stored = client.get("/settings/by-key/daily_times_config").json()["value"]
    assert stored == {"alos_hashachar": True, "sunrise_visible": False}


def test_options_list_catalogs(client):
    r = client.get("/constant-info/options")
    assert r.status_code == 200
    data = r.json()
    assert data["daily_times"][0] == {"key": "alos_hashachar", "label": "עלות השחר", "default_selected": False}
    assert [o["key"] for o in data["daily_study"]][:2] == ["daf_yomi", "daf_yomi_yerushalmi"]
