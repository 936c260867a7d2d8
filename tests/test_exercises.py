from datetime import datetime, timedelta


def test_create_exercise_and_today_summary(client, user_a):
    headers, user_id = user_a
    r = client.post("/api/exercises", headers=headers, json={
        "name": "Run", "duration": 30, "caloriesBurned": 300, "exerciseType": "cardio",
    })
    assert r.status_code == 200, r.data
    run = r.get_json()
    assert run["user"] == user_id

    r = client.get("/api/exercises/summary/today", headers=headers)
    assert r.status_code == 200
    summary = r.get_json()
    assert summary["totalDuration"] == 30
    assert summary["totalCaloriesBurned"] == 300
    assert summary["exercisesByType"] == {
        "cardio": [run],
        "strength": [],
        "flexibility": [],
        "balance": [],
    }


def test_create_exercise_validation(client, user_a):
    headers, _ = user_a
    r = client.post("/api/exercises", headers=headers, json={"name": "Lift", "duration": "long", "exerciseType": "yoga"})
    assert r.status_code == 400
    fields = {d["field"] for d in r.get_json()["error"]["details"]}
    assert fields == {"duration", "caloriesBurned", "exerciseType"}


def test_exercise_crud_and_ownership(client, user_a, user_b):
    headers_a, _ = user_a
    headers_b, _ = user_b
    earlier = (datetime.now() - timedelta(hours=30)).isoformat()
    old = client.post("/api/exercises", headers=headers_a, json={
        "name": "Yoga", "duration": 45, "caloriesBurned": 120, "exerciseType": "flexibility", "date": earlier,
    }).get_json()
    new = client.post("/api/exercises", headers=headers_a, json={
        "name": "Squats", "duration": 20, "caloriesBurned": 150, "exerciseType": "strength",
    }).get_json()

    listed = client.get("/api/exercises", headers=headers_a).get_json()
    assert [e["id"] for e in listed] == [new["id"], old["id"]]
    assert client.get("/api/exercises", headers=headers_b).get_json() == []

    assert client.get(f"/api/exercises/{new['id']}", headers=headers_a).get_json() == new
    assert client.get(f"/api/exercises/{new['id']}", headers=headers_b).status_code == 403
    assert client.get("/api/exercises/12345", headers=headers_a).status_code == 404
    assert client.get("/api/exercises/1.5", headers=headers_a).status_code == 404

    assert client.delete(f"/api/exercises/{old['id']}", headers=headers_b).status_code == 403
    r = client.delete(f"/api/exercises/{old['id']}", headers=headers_a)
    assert r.status_code == 200
    assert r.get_json()["message"] == "Exercise removed"

    # the day-old session never counted towards today
    summary = client.get("/api/exercises/summary/today", headers=headers_a).get_json()
    assert summary["totalDuration"] == 20
    assert summary["exercisesByType"]["strength"] == [new]
    assert summary["exercisesByType"]["flexibility"] == []
