import pytest


def _select(client, visualizer_id):
    resp = client.post(f"/api/visualizers/{visualizer_id}/select")
    assert resp.status_code == 200
    return resp.get_json()


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
def test_index(client):
    body = client.get("/").get_json()
    assert body["visualizers"] == 23
    assert "sorting" in body["categories"]
    assert body["speed_presets"]["slow"] == 1000


def test_catalog_filters_by_category(client):
    everything = client.get("/api/visualizers").get_json()["visualizers"]
    graphs = client.get("/api/visualizers?category=graphs").get_json()["visualizers"]
    assert len(everything) == 23
    assert {v["id"] for v in graphs} == {
        "kruskal", "prim", "dijkstra", "bellman-ford", "topological-sort", "bfs", "dfs", "a-star",
    }
    assert client.get("/api/visualizers/categories").get_json()["categories"][0] == "graphs"


def test_visualizer_metadata(client):
    meta = client.get("/api/visualizers/bst").get_json()
    assert meta["config"]["name"] == "Binary Search Tree"
    assert meta["default_action"] == "search"
    assert meta["pseudocode"]
    assert meta["complexity"]["time"]["worst"]
    assert "insert" in [a["id"] for a in meta["actions"]]


def test_unknown_visualizer_is_404(client):
    assert client.get("/api/visualizers/nope").status_code == 404
    assert client.post("/api/visualizers/nope/select").status_code == 404


# ---------------------------------------------------------------------------
# Session workspace
# ---------------------------------------------------------------------------
def test_routes_require_a_selection(client):
    assert client.post("/api/action", json={"type": "push"}).status_code == 400
    assert client.post("/api/step/next").status_code == 400
    assert client.get("/api/state").status_code == 400
    assert client.post("/api/config/speed", json={"speed": 100}).status_code == 400


def test_select_returns_initial_frame(client):
    body = _select(client, "stack")
    assert [e["value"] for e in body["initial_state"]["elements"]] == [15, 42, 7]
    assert body["svg"].startswith("<svg")
    assert body["frame"]["total_steps"] == 0
    assert body["frame"]["step"] is None


def test_action_commits_and_loads_steps(client):
    _select(client, "stack")
    body = client.post("/api/action", json={"type": "push", "params": {"value": 9}}).get_json()

    assert body["total_steps"] > 1
    assert body["current_step"] == 0
    assert [e["value"] for e in body["current_structure"]["elements"]] == [15, 42, 7, 9]

    state = client.get("/api/state").get_json()
    assert state["current_structure"] == body["current_structure"]


def test_action_rejects_bad_input(client):
    _select(client, "stack")
    bad_json = client.post("/api/action", data="{nope", content_type="application/json")
    assert bad_json.status_code == 400
    assert client.post("/api/action", json={"type": "push", "data": [1]}).status_code == 400
    assert client.post("/api/action", json={"type": "push", "params": [1]}).status_code == 400


def test_sorting_action_with_inline_data(client):
    _select(client, "bubble-sort")
    body = client.post("/api/action", json={"type": "sort", "data": [3, 1, 2]}).get_json()
    last = client.post("/api/step/end").get_json()
    assert last["current_step"] == body["total_steps"] - 1
    assert [e["value"] for e in last["step"]["snapshot"]["data"]] == [1, 2, 3]

    bad = client.post("/api/action", json={"type": "sort", "data": "abc"})
    assert bad.status_code == 400


def test_step_commands(client):
    _select(client, "bubble-sort")
    total = client.post("/api/action", json={"type": "sort"}).get_json()["total_steps"]

    assert client.post("/api/step/next").get_json()["current_step"] == 1
    assert client.post("/api/step/prev").get_json()["current_step"] == 0
    assert client.post("/api/step/goto", json={"index": 10_000}).get_json()["current_step"] == total - 1
    assert client.post("/api/step/goto", json={"index": "x"}).status_code == 400
    assert client.post("/api/step/reset").get_json()["current_step"] == 0

    assert client.post("/api/step/play").get_json()["is_playing"] is True
    ticked = client.post("/api/step/tick", json={"now": 1e15}).get_json()
    assert ticked["advanced"] is True
    assert ticked["current_step"] == 1
    assert client.post("/api/step/pause").get_json()["is_playing"] is False

    assert client.post("/api/step/sideways").status_code == 404


def test_speed_config(client):
    _select(client, "queue")
    assert client.post("/api/config/speed", json={"preset": "fast"}).get_json()["speed"] == 200
    assert client.post("/api/config/speed", json={"speed": 10}).get_json()["speed"] == 50
    assert client.post("/api/config/speed", json={"preset": "warp"}).status_code == 400
    assert client.post("/api/config/speed", json={"speed": "slow"}).status_code == 400


def test_reselect_replaces_workspace(client):
    _select(client, "stack")
    client.post("/api/action", json={"type": "push", "params": {"value": 9}})
    body = _select(client, "stack")
    assert [e["value"] for e in body["initial_state"]["elements"]] == [15, 42, 7]


# ---------------------------------------------------------------------------
# Comparison Mode
# ---------------------------------------------------------------------------
def test_compare_two_sorts(client):
    resp = client.post("/api/compare", json={
        "left": "bubble-sort", "right": "insertion-sort", "data": [5, 3, 8, 4, 2],
    })
    body = resp.get_json()
    assert resp.status_code == 200
    assert body["left"]["visualizer_name"] == "Bubble Sort"
    assert body["left"]["comparisons"] == 10
    assert body["right"]["visualizer_name"] == "Insertion Sort"
    assert body["winner_swaps"] in ("Bubble Sort", "Insertion Sort", "tie")


def test_compare_without_data_uses_shared_input(client):
    body = client.post("/api/compare", json={"left": "bubble-sort", "right": "bubble-sort"}).get_json()
    assert body["winner_comparisons"] == "tie"
    assert body["left"]["total_steps"] == body["right"]["total_steps"]


@pytest.mark.parametrize("payload, status", [
    ({"left": "bubble-sort"}, 400),
    ({"left": "bubble-sort", "right": "nope"}, 404),
    ({"left": "stack", "right": "queue", "data": [1, 2]}, 400),
])
def test_compare_errors(client, payload, status):
    assert client.post("/api/compare", json=payload).status_code == status


def test_compare_graph_and_grid_use_their_own_inputs(client):
    body = client.post("/api/compare", json={"left": "dijkstra", "right": "a-star"}).get_json()
    assert body["left"]["visualizer_name"] == "Dijkstra's Algorithm"
    assert body["right"]["visualizer_name"] == "A* Search"
    assert body["right"]["total_steps"] > 2


# ---------------------------------------------------------------------------
# Workspace eviction
# ---------------------------------------------------------------------------
def test_workspaces_are_capped_and_evict_least_recent(fresh_registry):
    from main import create_app

    app = create_app({"TESTING": True, "MAX_WORKSPACES": 3}, registry=fresh_registry)
    workspaces = app.extensions["algoviz"]["workspaces"]

    clients = [app.test_client() for _ in range(10)]
    for c in clients:
        _select(c, "bubble-sort")
    assert len(workspaces) == 3

    assert clients[0].get("/api/state").status_code == 400
    assert clients[-1].get("/api/state").status_code == 200


def test_recently_used_workspace_survives_eviction(fresh_registry):
    from main import create_app

    app = create_app({"TESTING": True, "MAX_WORKSPACES": 2}, registry=fresh_registry)
    workspaces = app.extensions["algoviz"]["workspaces"]
    first, second, third = app.test_client(), app.test_client(), app.test_client()

    _select(first, "stack")
    oldest = next(iter(workspaces.values()))
    _select(second, "queue")
    _select(third, "stack")
    assert oldest.visualizer.current is None

    assert first.get("/api/state").status_code == 400
    assert third.get("/api/state").status_code == 200
    _select(first, "queue")
    assert second.get("/api/state").status_code == 400
    assert third.get("/api/state").status_code == 200
