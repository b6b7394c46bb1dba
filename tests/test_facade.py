from apollo import AccountClient, ApolloConfig, EnrichmentClient, SearchClient, build_clients


def test_build_clients_wires_each_family(make_session):
    session = make_session(json_data={"ok": True})
    config = ApolloConfig(enrichment_api_key="e", search_api_key="s", account_api_key="a", timeout_seconds=9)

    clients = build_clients(config, session=session)

    assert isinstance(clients.enrichment, EnrichmentClient)
    assert isinstance(clients.search, SearchClient)
    assert isinstance(clients.accounts, AccountClient)
    assert clients.enrichment.base_url == "https://api.apollo.io/api/v1"
    assert clients.search.base_url == "https://api.apollo.io/v1"
    assert clients.accounts.base_url == "https://api.apollo.io/api/v1"

    clients.search.search_organizations({})
    assert session.last["headers"]["Authorization"] == "Bearer s"
    assert session.last["timeout"] == 9

    clients.accounts.list_account_stages()
    assert session.last["headers"]["x-api-key"] == "a"


def test_base_url_override_applies_to_all_families(make_session):
    config = ApolloConfig(base_url="https://gateway.test/apollo")
    clients = build_clients(config, session=make_session())

    assert {c.base_url for c in (clients.enrichment, clients.search, clients.accounts)} == {
        "https://gateway.test/apollo"
    }


def test_shared_session_left_open(make_session):
    session = make_session()
    with build_clients(ApolloConfig(), session=session):
        pass
    assert session.closed is False


def test_build_clients_loads_config_when_missing(monkeypatch, make_session):
    monkeypatch.setattr(
        "apollo.facade.ApolloConfig.load",
        classmethod(lambda cls: cls(account_api_key="loaded")),
    )
    clients = build_clients(session=make_session())
    assert clients.accounts.config.api_key == "loaded"
