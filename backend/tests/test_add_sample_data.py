import add_sample_data


def route_requests_to(client, monkeypatch):
    monkeypatch.setattr(add_sample_data, "API_BASE", "http://testserver/api/v1")
    monkeypatch.setattr(add_sample_data.requests, "get",
                        lambda url, timeout=None: client.get(url))
    monkeypatch.setattr(add_sample_data.requests, "post",
                        lambda url, json=None, timeout=None: client.post(url, json=json))


def test_seeds_sample_customers(client, monkeypatch):
    route_requests_to(client, monkeypatch)

    assert add_sample_data.main() == 0

    customers = client.get("/api/v1/customers").json()
    emails = [c["email"] for c in customers]
    assert emails == [c["email"] for c in add_sample_data.SAMPLE_CUSTOMERS] + [
        add_sample_data.SAMPLE_REGISTRATION["email"]
    ]
    assert customers[-1]["customer_type"] == "Regular"


def test_seeding_twice_skips_existing(client, monkeypatch, capsys):
    route_requests_to(client, monkeypatch)

    add_sample_data.main()
    add_sample_data.main()

    assert len(client.get("/api/v1/customers").json()) == len(add_sample_data.SAMPLE_CUSTOMERS) + 1
    assert "already registered" in capsys.readouterr().out
