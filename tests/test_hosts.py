import json


def test_list_passes_paging_and_uppercases_sortdir(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts", json={"count": 1, "items": [{"id": "h1"}]})

    result = privx.invoke(
        ["hosts", "--offset", "5", "--limit", "10", "--sortkey", "name", "--sortdir", "desc"]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [{"id": "h1"}]
    assert dict(privx.calls[0].url.params) == {
        "offset": "5",
        "limit": "10",
        "sortkey": "name",
        "sortdir": "DESC",
    }


def test_show_returns_hosts_in_order(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts/h1", json={"id": "h1", "common_name": "one"})
    privx.on("GET", "/host-store/api/v1/hosts/h2", json={"id": "h2", "common_name": "two"})

    result = privx.invoke(["hosts", "show", "--id", "h1,h2"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {"id": "h1", "common_name": "one"},
        {"id": "h2", "common_name": "two"},
    ]
    assert privx.paths == [
        ("GET", "/host-store/api/v1/hosts/h1"),
        ("GET", "/host-store/api/v1/hosts/h2"),
    ]


def test_show_stops_at_first_failure(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts/h1", json={"id": "h1"})
    privx.on("GET", "/host-store/api/v1/hosts/h2", status=404, json={"error_message": "host not found"})
    privx.on("GET", "/host-store/api/v1/hosts/h3", json={"id": "h3"})

    result = privx.invoke(["hosts", "show", "--id", "h1,h2,h3"])

    assert result.exit_code == 1
    assert "Host not found" in result.stderr
    assert ("GET", "/host-store/api/v1/hosts/h3") not in privx.paths


def test_create_passes_body_through(privx, json_file) -> None:
    host = {"common_name": "db", "addresses": ["10.0.0.1"], "custom_field": {"nested": [1, 2]}}
    privx.on("POST", "/host-store/api/v1/hosts", json={"id": "new-host"})

    result = privx.invoke(["hosts", "create", json_file(host)])

    assert result.exit_code == 0
    assert result.stdout == '"new-host"'
    assert privx.body(0) == host


def test_update_passes_body_through(privx, json_file) -> None:
    host = {"common_name": "db", "tags": ["prod"]}
    privx.on("PUT", "/host-store/api/v1/hosts/h1")

    result = privx.invoke(["hosts", "update", "--id", "h1", json_file(host)])

    assert result.exit_code == 0
    assert result.stdout == ""
    assert privx.body(0) == host


def test_search_with_optional_body(privx, json_file) -> None:
    privx.on("POST", "/host-store/api/v1/hosts/search", json={"count": 0, "items": []})

    result = privx.invoke(["hosts", "search", "--sortdir", "asc"])
    assert result.exit_code == 0
    assert privx.body(0) == {}
    assert privx.calls[0].url.params["sortdir"] == "ASC"

    result = privx.invoke(["hosts", "search", json_file({"keywords": "db"})])
    assert result.exit_code == 0
    assert privx.body(1) == {"keywords": "db"}


def test_delete_prints_each_deleted_id(privx) -> None:
    privx.on("DELETE", "/host-store/api/v1/hosts/h1")
    privx.on("DELETE", "/host-store/api/v1/hosts/h2")

    result = privx.invoke(["hosts", "delete", "--id", "h1, h2,"])

    assert result.exit_code == 0
    assert result.stdout == "h1\nh2\n"


def test_deployable_requires_status(privx) -> None:
    result = privx.invoke(["hosts", "deployable", "--id", "h1"])

    assert result.exit_code == 1
    assert privx.calls == []


def test_deployable_sets_status(privx) -> None:
    privx.on("PUT", "/host-store/api/v1/hosts/h1/deployable")

    result = privx.invoke(["hosts", "deployable", "--id", "h1", "--no-status"])

    assert result.exit_code == 0
    assert privx.body(0) == {"deployable": False}


def test_deploy_reuses_existing_trusted_client(privx) -> None:
    privx.on(
        "GET",
        "/local-user-store/api/v1/trusted-clients",
        json={"items": [{"id": "tc1", "name": "web", "type": "HOST_PROVISIONING"}]},
    )
    privx.on("POST", "/authorizer/api/v1/deploy/tc1/sessions", json={"session_id": "s1"})
    privx.on("GET", "/authorizer/api/v1/deploy/tc1/s1", content=b"#!/bin/sh\necho deploy\n")

    result = privx.invoke(["hosts", "deploy", "web"])

    assert result.exit_code == 0
    assert result.stdout == "#!/bin/sh\necho deploy\n"
    assert ("POST", "/local-user-store/api/v1/trusted-clients") not in privx.paths


def test_deploy_creates_missing_trusted_client(privx) -> None:
    privx.on("GET", "/local-user-store/api/v1/trusted-clients", json={"items": []})
    privx.on("POST", "/local-user-store/api/v1/trusted-clients", json={"id": "tc2"})
    privx.on("POST", "/authorizer/api/v1/deploy/tc2/sessions", json={"session_id": "s2"})
    privx.on("GET", "/authorizer/api/v1/deploy/tc2/s2", content=b"script")

    result = privx.invoke(["hosts", "deploy", "web"])

    assert result.exit_code == 0
    assert privx.body(1) == {"type": "HOST_PROVISIONING", "name": "web"}
    assert result.stdout == "script"


def test_tags_dispatch_on_type(privx) -> None:
    privx.on("GET", "/host-store/api/v1/hosts/tags", json={"items": ["prod"]})
    privx.on("GET", "/local-user-store/api/v1/users/tags", json={"items": ["admin"]})

    result = privx.invoke(["tags", "--type", "host", "--sortdir", "desc"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["prod"]
    assert privx.calls[0].url.params["sortdir"] == "DESC"

    result = privx.invoke(["tags", "--type", "user"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == ["admin"]


def test_tags_reject_unknown_type(privx) -> None:
    result = privx.invoke(["tags", "--type", "group"])

    assert result.exit_code == 1
    assert "group" in result.stderr
    assert privx.calls == []
