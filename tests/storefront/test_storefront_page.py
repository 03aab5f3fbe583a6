"""Tests for the HTML storefront page."""

from app.storefront.rendering import format_rub


def submit_form(client, follow_redirects=True, **form):
    data = {"package_id": "2", "player_id": "5123456", "payment_method": "sberbank"}
    data.update(form)
    return client.post("/purchase", data=data, follow_redirects=follow_redirects)


class TestPage:
    def test_renders_sections(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        html = response.text
        for anchor in ("catalog", "about", "payment", "reviews", "help", "contacts"):
            assert f'id="{anchor}"' in html
        assert "UC PUBG MOBILE" in html
        assert "ХИТ" in html
        assert "+25 UC бонус" in html
        assert "Как быстро приходят UC?" in html
        assert "@ucshop_support" in html

    def test_no_dialog_by_default(self, client):
        html = client.get("/").text
        assert 'id="purchase-dialog"' not in html
        assert 'id="history-dialog"' not in html

    def test_select_package_opens_dialog(self, client):
        html = client.get("/?package=3").text
        assert 'id="purchase-dialog"' in html
        assert "Покупка 660 UC" in html
        assert 'name="package_id" value="3"' in html

    def test_select_unknown_package(self, client):
        assert client.get("/?package=77").status_code == 404

    def test_static_styles(self, client):
        assert client.get("/static/styles.css").status_code == 200


class TestPurchaseForm:
    def test_successful_purchase(self, client):
        response = submit_form(client)
        assert response.status_code == 200
        html = response.text
        assert 'id="purchase-dialog"' not in html
        assert "Покупка 325 UC оформлена!" in html

        history = client.get("/api/v1/purchases/history").json()
        assert history["purchases"][0]["paymentMethod"] == "Карта Сбербанк"

    def test_success_redirects_to_confirmation(self, client):
        response = submit_form(client, follow_redirects=False)
        assert response.status_code == 303
        record_id = client.get("/api/v1/purchases/history").json()["purchases"][0]["id"]
        assert response.headers["location"] == f"/?purchased={record_id}"

    def test_reloading_confirmation_does_not_resubmit(self, client):
        location = submit_form(client, follow_redirects=False).headers["location"]
        first = client.get(location)
        second = client.get(location)

        assert "Покупка 325 UC оформлена!" in first.text
        assert "Покупка 325 UC оформлена!" in second.text
        assert client.get("/api/v1/purchases/history").json()["count"] == 1

    def test_invalid_player_id_keeps_dialog(self, client):
        response = submit_form(client, player_id="abc")
        assert response.status_code == 422
        html = response.text
        assert 'id="purchase-dialog"' in html
        assert 'value="abc"' in html
        assert "form-error" in html

        assert client.get("/api/v1/purchases/history").json()["count"] == 0

    def test_redirect_payment_opens_window(self, client):
        response = submit_form(
            client, package_id="1", player_id="7000001", payment_method="donationalerts"
        )
        html = response.text
        assert "window.open(" in html
        assert "donationalerts.com" in html
        assert "DonationAlerts" in html

        history = client.get("/api/v1/purchases/history").json()
        assert history["purchases"][0]["status"] == "pending"


class TestHistoryDialog:
    def test_empty_history(self, client):
        html = client.get("/?history=1").text
        assert 'id="history-dialog"' in html
        assert "У вас пока нет покупок" in html

    def test_lists_records_and_total(self, client):
        submit_form(client, package_id="1")
        submit_form(client, package_id="4", payment_method="crypto")

        html = client.get("/?history=1").text
        assert html.count("data-record-id=") == 2
        assert html.index("1800 UC</td>") < html.index("60 UC</td>")
        assert "Криптовалюта" in html
        assert "1 560₽" in html


def test_format_rub():
    assert format_rub(60) == "60₽"
    assert format_rub(1560) == "1 560₽"
    assert format_rub(1234567) == "1 234 567₽"
    assert format_rub(1560)[:-1].isascii()
