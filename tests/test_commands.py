import json


def test_sources_refresh_is_one_call(privx) -> None:
    privx.on("POST", "/role-store/api/v1/sources/refresh")

    result = privx.invoke(["sources", "refresh", "--id", "s1,s2"])

    assert result.exit_code == 0
    assert len(privx.calls) == 1
    assert privx.body(0) == ["s1", "s2"]


def test_index_start_is_one_call(privx) -> None:
    privx.on("POST", "/trail-index/api/v1/index/start", json={"items": []})

    result = privx.invoke(["index", "start", "--conn-id", "c1,c2,c3"])

    assert result.exit_code == 0
    assert privx.body(0) == ["c1", "c2", "c3"]


def test_user_roles_grant_and_revoke(privx) -> None:
    privx.on(
        "GET",
        "/role-store/api/v1/users/u1/roles",
        json={"items": [{"id": "r1", "explicit": True}, {"id": "r2", "explicit": True}]},
    )
    privx.on("PUT", "/role-store/api/v1/users/u1/roles")

    result = privx.invoke(["users", "roles", "--id", "u1", "--grant", "r3", "--revoke", "r1"])

    assert result.exit_code == 0
    puts = [i for i, (method, _) in enumerate(privx.paths) if method == "PUT"]
    assert privx.body(puts[0]) == [
        {"id": "r1", "explicit": True},
        {"id": "r2", "explicit": True},
        {"id": "r3", "explicit": True},
    ]
    assert privx.body(puts[1]) == [{"id": "r2", "explicit": True}]


def test_users_search_joins_queries(privx) -> None:
    privx.on("POST", "/role-store/api/v1/users/search", json={"items": [{"id": "u1"}]})

    result = privx.invoke(["users", "-q", "alice", "-q", "bob", "--source", "src1"])

    assert result.exit_code == 0
    assert privx.body(0) == {"keywords": "alice bob", "source": "src1"}


def test_roles_resolve(privx) -> None:
    privx.on("POST", "/role-store/api/v1/roles/resolve", json={"items": [{"id": "r1", "name": "admins"}]})

    result = privx.invoke(["roles", "resolve", "--name", "admins,users"])

    assert result.exit_code == 0
    assert privx.body(0) == ["admins", "users"]


def test_role_aws_token(privx) -> None:
    privx.on("GET", "/role-store/api/v1/roles/r1/awstoken", json={"access_key_id": "AKIA"})

    result = privx.invoke(["roles", "aws-token", "--id", "r1", "--mfa", "123456"])

    assert result.exit_code == 0
    assert dict(privx.calls[0].url.params) == {"tokencode": "123456", "ttl": "50"}


def test_identity_provider_search_defaults(privx) -> None:
    privx.on("POST", "/role-store/api/v1/identity-providers/search", json={"items": []})

    result = privx.invoke(["identity-providers", "search", "--keywords", "okta"])

    assert result.exit_code == 0
    assert privx.calls[0].url.params["sortdir"] == "ASC"
    assert privx.body(0) == {"keywords": "okta"}


def test_api_client_create(privx) -> None:
    privx.on("POST", "/local-user-store/api/v1/api-clients", json={"id": "ac1"})

    result = privx.invoke(["api-clients", "create", "--name", "ci", "--roles", "r1,r2"])

    assert result.exit_code == 0
    assert result.stdout == '"ac1"'
    assert privx.body(0) == {"name": "ci", "roles": [{"id": "r1"}, {"id": "r2"}]}


def test_local_users_list_filters(privx) -> None:
    privx.on("GET", "/local-user-store/api/v1/users", json={"items": []})

    result = privx.invoke(["local-users", "--name", "alice", "--limit", "5"])

    assert result.exit_code == 0
    assert dict(privx.calls[0].url.params) == {"offset": "0", "limit": "5", "username": "alice"}


def test_principal_keys_require_role(privx) -> None:
    result = privx.invoke(["principal-keys"])

    assert result.exit_code == 1
    assert privx.calls == []


def test_principal_keys_delete_per_id(privx) -> None:
    privx.on("DELETE", "/role-store/api/v1/roles/r1/principalkeys/k1")
    privx.on("DELETE", "/role-store/api/v1/roles/r1/principalkeys/k2")

    result = privx.invoke(["principal-keys", "delete", "--role-id", "r1", "--id", "k1,k2"])

    assert result.exit_code == 0
    assert result.stdout == "k1\nk2\n"


def test_sessions_show_needs_one_owner(privx) -> None:
    assert privx.invoke(["sessions", "show"]).exit_code == 1
    assert privx.invoke(["sessions", "show", "--user-id", "u1", "--source-id", "s1"]).exit_code == 1
    assert privx.calls == []


def test_sessions_show_defaults(privx) -> None:
    privx.on("GET", "/auth/api/v1/sessionstorage/users/u1/sessions", json={"items": []})

    result = privx.invoke(["sessions", "show", "--user-id", "u1"])

    assert result.exit_code == 0
    params = privx.calls[0].url.params
    assert params["sortkey"] == "expires"
    assert params["sortdir"] == "ASC"


def test_requests_search_uppercases_filter(privx) -> None:
    privx.on("POST", "/workflow-engine/api/v1/requests/search", json={"items": []})

    result = privx.invoke(["requests", "search", "--filter", "incoming"])

    assert result.exit_code == 0
    assert privx.calls[0].url.params["filter"] == "INCOMING"
    assert privx.body(0) == {}


def test_license_stats_opt_out(privx) -> None:
    privx.on("POST", "/license-manager/api/v1/license/optin")

    result = privx.invoke(["license", "stats", "--no-optin"])

    assert result.exit_code == 0
    assert privx.body(0) == {"optin": False}


def test_nam_disable_and_enable(privx) -> None:
    privx.on("PUT", "/network-access-manager/api/v1/nwtargets/t1/disabled")

    assert privx.invoke(["nam", "disable", "--id", "t1"]).exit_code == 0
    assert privx.invoke(["nam", "disable", "--id", "t1", "--enable"]).exit_code == 0

    assert privx.body(0) == {"disabled": True}
    assert privx.body(1) == {"disabled": False}


def test_nam_list_defaults(privx) -> None:
    privx.on("GET", "/network-access-manager/api/v1/nwtargets", json={"items": []})

    result = privx.invoke(["nam"])

    assert result.exit_code == 0
    params = privx.calls[0].url.params
    assert params["sortkey"] == "id"
    assert params["sortdir"] == "ASC"


def test_access_group_revoke_ca(privx) -> None:
    privx.on("DELETE", "/authorizer/api/v1/accessgroups/g1/cas/ca1")

    result = privx.invoke(["access-groups", "revoke-ca", "--id", "g1", "--ca-id", "ca1"])

    assert result.exit_code == 0


def test_principal_sign_with_key(privx, json_file) -> None:
    privx.on("POST", "/authorizer/api/v1/principals/g1/k1/sign", json={"signature": "sig"})

    result = privx.invoke(["principals", "sign", "--id", "g1", "--key-id", "k1", json_file({"data": "x"})])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {"signature": "sig"}


def test_authorizer_ca_certificate_download(privx, tmp_path) -> None:
    privx.on("GET", "/authorizer/api/v1/cas/ca1", content=b"-----BEGIN CERTIFICATE-----")
    target = tmp_path / "ca.pem"

    result = privx.invoke(["authorizer", "show", "--id", "ca1", "--name", str(target)])

    assert result.exit_code == 0
    assert target.read_bytes() == b"-----BEGIN CERTIFICATE-----"


def test_mobilegw_unpair_device(privx) -> None:
    privx.on("DELETE", "/auth/api/v1/users/u1/mobilegw/devices/d1")

    result = privx.invoke(["mobilegw", "unpair-device", "--user-id", "u1", "--device-id", "d1"])

    assert result.exit_code == 0
    assert privx.paths == [("DELETE", "/auth/api/v1/users/u1/mobilegw/devices/d1")]


def test_components_show(privx) -> None:
    privx.on("GET", "/monitor-service/api/v1/components/node1", json={"status": "ok"})

    result = privx.invoke(["components", "show", "--name", "node1"])

    assert json.loads(result.stdout) == [{"status": "ok"}]
