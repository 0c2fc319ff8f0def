import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    main._SESSIONS.clear()
    with main.app.test_client() as client:
        yield client
    main._SESSIONS.clear()


def configure(client, **data):
    return client.post("/api/config", json=data)


def test_index_renders_panels(client):
    response = client.get("/")
    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert 'id="algo-selector"' in body
    assert "Bubble Sort" in body
    assert "<svg" in body


def test_algorithm_listing(client):
    data = client.get("/api/algorithms").get_json()
    assert len(data["algorithms"]) == 21
    assert data["algorithms"][0]["label"] == "Bubble Sort"


def test_initial_state(client):
    data = client.get("/api/state").get_json()
    assert data["run_state"] == "idle"
    assert len(data["array"]) == 30
    assert data["events"] == 0
    assert data["svg"].count("<rect") == 30


def test_config_change_regenerates_array(client):
    data = configure(client, algorithm="quick", distribution="ascending", size=12).get_json()
    assert data["array"] == list(range(1, 13))
    assert data["config"] == {"size": 12, "algorithm": "Quick Sort", "distribution": "Ascending"}
    assert "code-line" in data["pseudocode"]


def test_invalid_size_keeps_previous(client):
    configure(client, size=40)
    data = configure(client, size="many").get_json()
    assert data["size"] == 40


def test_unknown_algorithm_is_bad_request(client):
    response = configure(client, algorithm="Sleep Sort")
    assert response.status_code == 400
    assert "Unknown algorithm" in response.get_json()["error"]


def test_run_produces_comparison_tones(client):
    configure(client, algorithm="Quick Sort", distribution="ascending", size=12)
    started = client.post("/api/start").get_json()
    assert started["run_state"] == "running"

    data = client.post("/api/tick").get_json()
    assert data["steps"] >= 1
    assert data["comparisons"] >= 1
    # first comparison is a[0] = 1 against the pivot, out of 12
    assert data["tones"][0] == 275.0


def test_audio_toggle_suppresses_tones(client):
    configure(client, audio=False)
    client.post("/api/start")
    data = client.post("/api/tick").get_json()
    assert data["tones"] == []


def test_config_locked_while_sorting(client):
    client.post("/api/start")
    assert configure(client, size=50).status_code == 409
    # audio can still be toggled
    assert configure(client, audio=False).status_code == 200


def test_pause_and_reset(client):
    client.post("/api/start")
    paused = client.post("/api/pause").get_json()
    assert paused["run_state"] == "paused"
    assert "Resume" in paused["playback"]

    reset = client.post("/api/reset").get_json()
    assert reset["run_state"] == "idle"
    assert reset["comparisons"] == 0
    assert reset["tones"] == []


def test_summary_counts_whole_run(client):
    configure(client, algorithm="Quick Sort", distribution="ascending", size=12)
    data = client.get("/api/summary").get_json()
    metrics = data["metrics"]
    assert metrics["comparisons"] == 66
    assert metrics["sorted_ok"] is True
    assert metrics["writes"] == metrics["swaps"] + metrics["updates"]
    assert "Quick Sort on 12 elements" in data["html"]


def test_sessions_are_per_client(client):
    configure(client, size=15)
    other = main.app.test_client()
    assert len(other.get("/api/state").get_json()["array"]) == 30
    assert len(client.get("/api/state").get_json()["array"]) == 15


def test_compare_runs_both_algorithms_on_current_array(client):
    configure(client, algorithm="insertion", distribution="ascending", size=10)
    data = client.get("/api/compare?right=selection").get_json()

    assert data["left"]["algo_label"] == "Insertion Sort"
    assert data["left"]["comparisons"] == 9
    assert data["right"]["comparisons"] == 45
    assert data["right"]["writes"] == 0
    assert data["winner_comparisons"] == "Insertion Sort"
    assert data["winner_writes"] == "Selection Sort"


def test_compare_rejects_missing_or_unknown_algorithm(client):
    assert client.get("/api/compare").status_code == 400
    assert client.get("/api/compare?right=sleep").status_code == 400


def test_driver_calls_hold_the_user_lock(client):
    client.get("/api/state")
    user = next(iter(main._SESSIONS.values()))
    held = []
    user.driver.on_step = lambda event: held.append(user.lock.locked())

    client.post("/api/start")
    client.post("/api/tick")
    assert held
    assert all(held)
    assert not user.lock.locked()


def test_sessions_are_capped_least_recently_used_first(client, monkeypatch):
    monkeypatch.setattr(main, "MAX_SESSIONS", 5)
    client.get("/api/state")
    kept = next(iter(main._SESSIONS))

    main.app.test_client().get("/api/state")
    stale = list(main._SESSIONS)[-1]

    for _ in range(10):
        main.app.test_client().get("/api/state")
        client.get("/api/state")

    assert len(main._SESSIONS) == 5
    assert kept in main._SESSIONS
    assert stale not in main._SESSIONS
