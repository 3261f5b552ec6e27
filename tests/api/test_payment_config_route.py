def test_payment_config_defaults(client):
    response = client.get("/api/payment-config")

    assert response.status_code == 200
    assert response.json() == {"upiId": "astrosharma74@ptyes", "merchantName": "AstroSharma"}


def test_payment_config_from_settings(client, app_and_deps):
    app, _, _ = app_and_deps
    app.state.settings = app.state.settings.model_copy(
        update={"payment_upi_id": "shop@upi", "payment_merchant_name": "Shop"}
    )

    response = client.get("/api/payment-config")

    assert response.json() == {"upiId": "shop@upi", "merchantName": "Shop"}
