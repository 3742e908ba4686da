def test_index_and_health(client):
    body = client.get("/").get_json()
    assert "/compatibility" in body["endpoints"]

    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True, "default_system": "maghribi"}


def test_abjad_total(client):
    resp = client.get("/abjad", query_string={"name": "محمد"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["total"] == 92
    assert body["saghir"] == 2
    assert body["system"] == "maghribi"
    assert [lv["value"] for lv in body["letters"]] == [40, 8, 40, 4]


def test_abjad_system_override(client):
    resp = client.get("/abjad", query_string={"name": "غفور", "system": "mashriqi"})
    assert resp.get_json()["total"] == 1086


def test_abjad_latin_name(client):
    body = client.get("/abjad", query_string={"name": "Ali"}).get_json()
    assert body["arabic"] == "علي"
    assert body["total"] == 110


def test_abjad_rejects_bad_input(client):
    assert client.get("/abjad", query_string={"name": "123"}).status_code == 422
    assert client.get("/abjad", query_string={"name": "  "}).status_code == 422
    assert client.get("/abjad", query_string={"name": "م" * 101}).status_code == 422
    assert client.get("/abjad", query_string={"name": "علي", "system": "hebrew"}).status_code == 422
    assert client.get("/abjad").status_code == 422


def test_normalize(client):
    resp = client.post("/normalize", json={"text": "مُحَمَّد"})
    assert resp.status_code == 200
    assert resp.get_json()["normalized"] == "محمد"

    resp = client.post("/normalize", json={"text": "فاطمة", "options": {"ta_marbuta_as": "ة"}})
    assert resp.get_json()["normalized"] == "فاطمة"


def test_transliterate(client):
    body = client.get("/transliterate", query_string={"text": "Muhammad"}).get_json()
    assert body["primary"] == "محمد"
    assert body["confidence"] == 100


def test_name_destiny(client):
    resp = client.post("/name-destiny", json={"name": "محمد", "mother_name": "فاطمة"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["kabir"] == 92
    assert body["burj"]["name"] == "Scorpio"
    assert body["quran"]["surah"] == 92
    assert body["quran"]["ayah_hint"] == 3
    assert body["divine_name_number"] == 2
    assert body["personal"]["combined_total"] == 227
    assert body["personal"]["blessed_day"] == "Thursday"


def test_name_destiny_rejects_empty_name(client):
    assert client.post("/name-destiny", json={"name": ""}).status_code == 422


def test_compatibility(client):
    resp = client.post(
        "/compatibility",
        json={"person_a": {"name": "محمد"}, "person_b": {"name": "علي"}},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["overall_score"] == 79
    assert body["label"] == "compatible"
    assert body["four_layer_available"] is False
    assert body["four_layer"]["available"] is False
    assert body["four_layer"]["daily_life"] is None
    assert body["planetary"]["ruler"]["name"] == "Venus"


def test_compatibility_four_layer(client):
    resp = client.post(
        "/compatibility",
        json={
            "person_a": {"name": "محمد", "mother_name": "فاطمة"},
            "person_b": {"name": "علي", "mother_name": "خديجة"},
        },
    )
    body = resp.get_json()
    assert body["four_layer_available"] is True
    layers = body["four_layer"]
    assert layers["daily_life"]["score"] == 60
    assert layers["emotional"]["affinity"]["relation"] == "opposing"
    assert [e["key"] for e in layers["cross_dynamic_a"]["elements"]] == ["water", "earth"]
    assert layers["cross_dynamic_b"]["score"] == 40
    assert body["person_b"]["mother_element"]["key"] == "earth"
    assert body["overall_score"] == 57
    assert set(body["weights"]) >= {"daily_life", "emotional", "cross_dynamic_a", "cross_dynamic_b"}


def test_compatibility_rejects_missing_name(client):
    resp = client.post(
        "/compatibility",
        json={"person_a": {"name": "محمد"}, "person_b": {"name": ""}},
    )
    assert resp.status_code == 422
    assert client.post("/compatibility", json={"person_a": {"name": "محمد"}}).status_code == 422


def test_istikhara(client):
    resp = client.post("/istikhara", json={"name": "محمد", "mother_name": "فاطمة"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["burj"]["name"] == "Aquarius"
    assert body["repetition_count"] == 227
    assert body["element"]["key"] == "air"

    assert client.post("/istikhara", json={"name": "محمد"}).status_code == 422


def test_elements(client):
    body = client.get("/elements").get_json()
    assert [e["key"] for e in body] == ["fire", "earth", "air", "water"]
    assert client.get("/elements/4").get_json()["name"] == "Water"
    assert client.get("/elements/5").status_code == 404
    assert client.get("/elements/0").status_code == 404


def test_buruj(client):
    body = client.get("/buruj/12").get_json()
    assert body["name"] == "Pisces"
    assert body["element"]["key"] == "water"
    assert body["verse"]["reference"].startswith("Al-Fatiha")
    assert client.get("/buruj/13").status_code == 404


def test_istikhara_accepts_normalization_options(client):
    resp = client.post(
        "/istikhara",
        json={"name": "محمد", "mother_name": "فاطمة", "options": {"ta_marbuta_as": "ة"}},
    )
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["mother_total"] == 530
    assert body["combined_total"] == 622


def test_engine_index_error_is_a_logged_500(client, monkeypatch, caplog):
    from abjad_api import destiny
    from abjad_api.errors import InvalidIndex

    def broken_burj(total):
        raise InvalidIndex("burj index must be in 1..12, got 0")

    monkeypatch.setattr(destiny, "burj_from_total", broken_burj)
    with caplog.at_level("ERROR", logger="abjad_api.factory"):
        resp = client.post("/name-destiny", json={"name": "محمد"})

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "burj index must be in 1..12, got 0"
    assert "engine error" in caplog.text
