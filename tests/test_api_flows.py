# 📄 File: tests/test_api_flows.py
# 🧭 Purpose (Layman Explanation):
# Uses the app the way the website does: sign up, add plants, tick off care tasks, share
# with the community and identify plants until the free allowance runs out.
# 🧪 Purpose (Technical Summary):
# HTTP-level tests through FastAPI's TestClient covering auth/session cookies, plant and
# care endpoints, the community feed, metered identification, the error envelope and the
# health endpoints.
# 🔗 Dependencies:
# pytest, fastapi.testclient, tests.support
# 🔄 Connected Modules / Calls From:
# pytest

from tests.support import MAX_TEST_IMAGE_SIZE, create_plant, login, register

IMAGE = ("leaf.jpg", b"\xff\xd8fake-jpeg-bytes", "image/jpeg")


# =============================================================================
# AUTHENTICATION
# =============================================================================

class TestAuth:
    def test_register_logs_in_with_signup_grant(self, client):
        body = register(client, "alice", firstName="Alice")

        assert body["username"] == "alice"
        assert body["firstName"] == "Alice"
        assert body["subscriptionType"] == "free"
        assert body["identificationsRemaining"] == 5
        assert "passwordHash" not in body and "password_hash" not in body
        assert client.cookies.get("sid")

        me = client.get("/api/me")
        assert me.status_code == 200
        assert me.json()["id"] == body["id"]

    def test_duplicate_username_conflicts(self, client):
        register(client, "alice")
        response = client.post("/api/register", json={
            "username": "ALICE",
            "password": "secret123",
            "passwordConfirm": "secret123",
            "email": "another@example.com",
        })
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_RESOURCE"

    def test_password_mismatch_is_a_validation_error(self, client):
        response = client.post("/api/register", json={
            "username": "alice",
            "password": "secret123",
            "passwordConfirm": "different",
            "email": "alice@example.com",
        })
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_bad_credentials(self, client):
        register(client, "alice")
        client.cookies.clear()
        response = client.post("/api/login", json={"username": "alice", "password": "nope"})
        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid username or password"

    def test_login_and_logout(self, client):
        register(client, "alice")
        login(client, "alice", "secret123")
        assert client.get("/api/me").status_code == 200

        assert client.post("/api/logout").status_code == 200
        assert client.get("/api/me").status_code == 401

    def test_session_expires(self, client, clock, settings):
        register(client, "alice")
        clock.advance(hours=settings.SESSION_TTL_SECONDS / 3600 + 1)
        assert client.get("/api/me").status_code == 401

    def test_protected_routes_require_session(self, client):
        for method, path in [("get", "/api/plants"), ("get", "/api/care-actions"), ("post", "/api/start-free-trial")]:
            response = getattr(client, method)(path)
            assert response.status_code == 401, path
            assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"


# =============================================================================
# PLANTS AND CARE
# =============================================================================

class TestPlants:
    def test_create_list_update_delete(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern", waterFrequency=3, lightNeeds="indirect")

        assert plant["waterFrequency"] == 3
        assert plant["careHealth"] == 100.0
        assert plant["isPublic"] is False

        assert [p["name"] for p in client.get("/api/plants").json()] == ["Fern"]

        updated = client.put(f"/api/plants/{plant['id']}", json={"name": "Boston Fern", "notes": "by window"})
        assert updated.status_code == 200
        assert updated.json()["name"] == "Boston Fern"
        assert updated.json()["waterFrequency"] == 3

        assert client.delete(f"/api/plants/{plant['id']}").status_code == 200
        assert client.get(f"/api/plants/{plant['id']}").status_code == 404

    def test_invalid_frequency_rejected(self, client):
        register(client, "alice")
        response = client.post("/api/plants", json={"name": "Fern", "waterFrequency": 0})
        assert response.status_code == 422

    def test_other_users_plant_is_forbidden(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern")

        register(client, "bob")
        assert client.get(f"/api/plants/{plant['id']}").status_code == 403
        assert client.put(f"/api/plants/{plant['id']}", json={"name": "Mine"}).status_code == 403
        assert client.delete(f"/api/plants/{plant['id']}").status_code == 403
        assert client.get("/api/plants").json() == []

    def test_water_and_fertilize(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern", waterFrequency=3, fertilizeFrequency=30)

        watered = client.post(f"/api/plants/{plant['id']}/water")
        fed = client.post(f"/api/plants/{plant['id']}/fertilize")

        assert watered.status_code == 200 and watered.json()["lastWatered"]
        assert fed.status_code == 200 and fed.json()["lastFertilized"]

        pending = client.get("/api/care-actions/pending").json()
        assert sorted(a["actionType"] for a in pending) == ["fertilize", "water"]


class TestCareActions:
    def test_initial_schedule_and_completion(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern", waterFrequency=2)

        pending = client.get("/api/care-actions/pending").json()
        assert len(pending) == 1
        assert pending[0]["actionType"] == "water"
        assert pending[0]["plant"]["name"] == "Fern"

        done = client.post(f"/api/care-actions/{pending[0]['id']}/complete")
        assert done.status_code == 200
        assert done.json()["isCompleted"] is True

        all_actions = client.get("/api/care-actions").json()
        assert len(all_actions) == 2
        [next_action] = client.get("/api/care-actions/pending").json()
        assert next_action["id"] != pending[0]["id"]
        assert next_action["plantId"] == plant["id"]

    def test_manual_care_action(self, client, clock):
        register(client, "alice")
        plant = create_plant(client, "Fern")

        response = client.post("/api/care-actions", json={
            "plantId": plant["id"],
            "actionType": "repot",
            "dueDate": clock().isoformat(),
        })
        assert response.status_code == 201
        assert response.json()["actionType"] == "repot"

    def test_due_date_without_offset_is_read_as_utc(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern")
        created = client.post("/api/care-actions", json={
            "plantId": plant["id"],
            "actionType": "mist",
            "dueDate": "2025-06-03T09:00:00",
        })
        assert created.status_code == 201

        response = client.get("/api/care-actions/pending")
        assert response.status_code == 200
        [pending] = response.json()
        assert pending["actionType"] == "mist"
        assert pending["dueDate"] == "2025-06-03T09:00:00Z"

    def test_plant_timestamps_without_offset_are_read_as_utc(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern")

        updated = client.put(f"/api/plants/{plant['id']}", json={"lastWatered": "2025-06-01T08:30:00"})
        assert updated.status_code == 200
        assert client.get(f"/api/plants/{plant['id']}").json()["lastWatered"] == "2025-06-01T08:30:00Z"

    def test_unknown_action_type_rejected(self, client, clock):
        register(client, "alice")
        plant = create_plant(client, "Fern")
        response = client.post("/api/care-actions", json={
            "plantId": plant["id"],
            "actionType": "sing",
            "dueDate": clock().isoformat(),
        })
        assert response.status_code == 422

    def test_completing_foreign_action_is_forbidden(self, client):
        register(client, "alice")
        create_plant(client, "Fern", waterFrequency=2)
        [action] = client.get("/api/care-actions/pending").json()

        register(client, "bob")
        assert client.post(f"/api/care-actions/{action['id']}/complete").status_code == 403
        assert client.post("/api/care-actions/999/complete").status_code == 404


# =============================================================================
# COMMUNITY
# =============================================================================

class TestCommunity:
    def test_share_like_and_delete(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern", isPublic=True, imageUrl="https://img/fern.jpg")

        created = client.post("/api/community", json={"plantId": plant["id"], "title": "My fern"})
        assert created.status_code == 201
        share = created.json()
        assert share["likes"] == 0
        assert share["imageUrl"] == "https://img/fern.jpg"

        register(client, "bob")
        assert client.post(f"/api/community/{share['id']}/like").json()["likes"] == 1
        assert client.post(f"/api/community/{share['id']}/like").json()["likes"] == 2
        assert client.delete(f"/api/community/{share['id']}").status_code == 403

        feed = client.get("/api/community").json()
        assert [s["title"] for s in feed] == ["My fern"]
        assert [p["name"] for p in client.get("/api/community/plants").json()] == ["Fern"]

        login(client, "alice", "secret123")
        assert client.delete(f"/api/community/{share['id']}").status_code == 200
        assert client.get("/api/community").json() == []

    def test_cannot_share_someone_elses_plant(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern")

        register(client, "bob")
        response = client.post("/api/community", json={"plantId": plant["id"], "title": "Not mine"})
        assert response.status_code == 403

    def test_deleting_plant_removes_its_posts(self, client):
        register(client, "alice")
        plant = create_plant(client, "Fern")
        client.post("/api/community", json={"plantId": plant["id"], "title": "Fern"})

        client.delete(f"/api/plants/{plant['id']}")
        assert client.get("/api/community").json() == []

    def test_liking_missing_post(self, client):
        register(client, "alice")
        assert client.post("/api/community/42/like").status_code == 404


# =============================================================================
# IDENTIFICATION
# =============================================================================

class TestIdentification:
    def test_free_user_quota_runs_out(self, client, identifier):
        register(client, "alice")

        for expected_remaining in (4, 3, 2, 1, 0):
            response = client.post("/api/identify", files={"image": IMAGE})
            assert response.status_code == 200, response.text
            body = response.json()
            assert body["identificationsRemaining"] == expected_remaining
            assert body["suggestions"][0]["plantName"] == "Monstera deliciosa"

        blocked = client.post("/api/identify", files={"image": IMAGE})
        assert blocked.status_code == 403
        body = blocked.json()
        assert body["upgrade"] is True
        assert body["error"]["code"] == "UPGRADE_REQUIRED"
        assert identifier.calls == 5

    def test_failed_recognition_does_not_consume_quota(self, client, identifier):
        register(client, "alice")
        identifier.fail = True

        response = client.post("/api/identify", files={"image": IMAGE})
        assert response.status_code == 502
        assert response.json()["error"]["code"] == "EXTERNAL_SERVICE_ERROR"
        assert client.get("/api/me").json()["identificationsRemaining"] == 5

    def test_trial_user_is_not_metered(self, client):
        register(client, "alice")
        assert client.post("/api/start-free-trial").status_code == 200

        response = client.post("/api/identify", files={"image": IMAGE})
        assert response.status_code == 200
        assert response.json()["identificationsRemaining"] == 5

    def test_oversized_image(self, client, identifier):
        register(client, "alice")
        big = ("big.jpg", b"x" * (MAX_TEST_IMAGE_SIZE + 1), "image/jpeg")

        response = client.post("/api/identify", files={"image": big})
        assert response.status_code == 413
        assert response.json()["error"]["code"] == "FILE_TOO_LARGE"
        assert identifier.calls == 0

    def test_empty_and_missing_image(self, client):
        register(client, "alice")

        empty = client.post("/api/identify", files={"image": ("empty.jpg", b"", "image/jpeg")})
        assert empty.status_code == 422

        missing = client.post("/api/identify")
        assert missing.status_code == 422
        assert missing.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_unconfigured_recognizer(self, client, container):
        register(client, "alice")
        container.identification._identifier = None

        response = client.post("/api/identify", files={"image": IMAGE})
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "SERVICE_NOT_CONFIGURED"
        assert client.get("/api/me").json()["identificationsRemaining"] == 5


# =============================================================================
# ENVELOPE, ANALYTICS AND HEALTH
# =============================================================================

class TestPlatform:
    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/api/does-not-exist", headers={"X-Request-ID": "req-123"})
        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "HTTP_404"
        assert error["request_id"] == "req-123"
        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client):
        response = client.get("/api/community")
        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("s")

    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["service"] == "snaptheplant-api"

    def test_detailed_health(self, client):
        response = client.get("/health/detailed")
        assert response.status_code == 200
        body = response.json()
        assert body["components"]["storage"]["status"] == "healthy"
        assert body["components"]["collaborators"] == {
            "plant_identification": True,
            "payments": True,
            "email": True,
        }

    def test_root_info(self, client):
        assert client.get("/").json()["api_base"] == "/api"

    def test_analytics_and_feedback_are_written(self, client, settings, clock):
        register(client, "alice")
        tracked = client.post("/api/analytics/track", json={"event": "opened_app", "properties": {"screen": "home"}})
        feedback = client.post("/api/beta-feedback", json={"type": "bug", "feedback": "Camera froze"})

        assert tracked.json()["success"] is True
        assert feedback.json()["message"] == "Feedback received"

        day = clock().strftime("%Y-%m-%d")
        log_dir = settings.ANALYTICS_LOG_DIR
        with open(f"{log_dir}/analytics_{day}.log", encoding="utf-8") as handle:
            assert '"event": "opened_app"' in handle.read()
        with open(f"{log_dir}/beta_feedback_{day}.log", encoding="utf-8") as handle:
            assert "Camera froze" in handle.read()
