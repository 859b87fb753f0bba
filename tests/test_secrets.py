import json


def test_delete_aborts_on_first_failure(privx) -> None:
    privx.on("DELETE", "/vault/api/v1/secrets/s1")
    privx.on("DELETE", "/vault/api/v1/secrets/s2", status=404, json={"error_message": "secret not found"})
    privx.on("DELETE", "/vault/api/v1/secrets/s3")

    result = privx.invoke(["secrets", "delete", "--name", "s1,s2,s3"])

    assert result.exit_code == 1
    assert result.stdout == "s1\n"
    assert "Secret not found" in result.stderr
    assert privx.paths == [
        ("DELETE", "/vault/api/v1/secrets/s1"),
        ("DELETE", "/vault/api/v1/secrets/s2"),
    ]


def test_create_sends_access_lists(privx, json_file) -> None:
    data = {"username": "root", "password": "hunter2"}
    privx.on("POST", "/vault/api/v1/secrets", json={"name": "db"})

    result = privx.invoke(
        [
            "secrets",
            "create",
            "--name",
            "db",
            "--allow-read-to",
            "r1",
            "--allow-read-to",
            "r2",
            "--allow-write-to",
            "r1",
            json_file(data),
        ]
    )

    assert result.exit_code == 0
    assert privx.body(0) == {
        "name": "db",
        "data": data,
        "allow_read": [{"id": "r1"}, {"id": "r2"}],
        "allow_write": [{"id": "r1"}],
    }
    assert json.loads(result.stdout) == data


def test_update_keeps_current_access_lists(privx, json_file) -> None:
    privx.on(
        "GET",
        "/vault/api/v1/secrets/db",
        json={
            "name": "db",
            "allow_read": [{"id": "r1", "name": "readers"}],
            "allow_write": [{"id": "w1", "name": "writers"}],
        },
    )
    privx.on("PUT", "/vault/api/v1/secrets/db")

    result = privx.invoke(
        ["secrets", "update", "--name", "db", "--allow-read-to", "r9", json_file({"k": "v"})]
    )

    assert result.exit_code == 0
    assert privx.body(1) == {
        "data": {"k": "v"},
        "allow_read": [{"id": "r9"}],
        "allow_write": [{"id": "w1"}],
    }


def test_search_validates_before_request(privx) -> None:
    for args in (["--filter", "everything"], ["--sortdir", "up"], ["--sortkey", "size"]):
        result = privx.invoke(["secrets", "search", *args])

        assert result.exit_code == 1
        assert privx.calls == []


def test_search_normalises_and_sends_body(privx) -> None:
    privx.on("POST", "/vault/api/v1/search/secrets", json={"count": 1, "items": [{"name": "db"}]})

    result = privx.invoke(
        [
            "secrets",
            "search",
            "--keywords",
            "db",
            "--filter",
            "Personal",
            "--sortkey",
            "Name",
            "--sortdir",
            "desc",
            "--owner-ids",
            "u1",
            "--owner-ids",
            "u2",
        ]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"name": "db"}]
    params = privx.calls[0].url.params
    assert params["sortkey"] == "name"
    assert params["sortdir"] == "DESC"
    assert privx.body(0) == {"keywords": "db", "filter": "personal", "owner_ids": ["u1", "u2"]}


def test_user_secret_show_stops_on_error_by_default(privx) -> None:
    privx.on("GET", "/vault/api/v1/user/u1/secrets/a", status=404, json={"error_message": "no such secret"})
    privx.on("GET", "/vault/api/v1/user/u1/secrets/b", json={"name": "b"})

    result = privx.invoke(["user-secrets", "show", "--owner-id", "u1", "--name", "a,b"])

    assert result.exit_code == 1
    assert len(privx.calls) == 1


def test_user_secret_show_can_skip_failures(privx) -> None:
    privx.on("GET", "/vault/api/v1/user/u1/secrets/a", status=404, json={"error_message": "no such secret"})
    privx.on("GET", "/vault/api/v1/user/u1/secrets/b", json={"name": "b"})

    result = privx.invoke(
        ["user-secrets", "show", "--owner-id", "u1", "--name", "a,b", "--ignore-error"]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"name": "b"}]


def test_user_secret_show_fails_when_every_name_fails(privx) -> None:
    privx.on("GET", "/vault/api/v1/user/u1/secrets/a", status=404, json={"error_message": "no such secret"})

    result = privx.invoke(["user-secrets", "show", "--owner-id", "u1", "--name", "a", "--ignore-error"])

    assert result.exit_code == 1
    assert "No such secret" in result.stderr


def test_user_secret_show_limits_batch_size(privx) -> None:
    names = ",".join(f"s{i}" for i in range(101))

    result = privx.invoke(["user-secrets", "show", "--owner-id", "u1", "--name", names])

    assert result.exit_code == 1
    assert privx.calls == []


def test_user_secrets_list_requires_owner(privx) -> None:
    result = privx.invoke(["user-secrets"])

    assert result.exit_code == 1
    assert privx.calls == []
