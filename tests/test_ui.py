def test_form_renders_with_quotes(client):
    r = client.get("/ui")
    assert r.status_code == 200
    html = r.text
    assert "Calculá tu Fondo de Emergencia" in html
    assert "Dólar Oficial (Venta: 1000.0)" in html
    assert "Dólar Blue (Venta: 1200.0)" in html
    assert "Dólar MEP (Venta: 500.0)" in html
    # empty fields keep Calcular disabled
    assert 'type="submit" disabled' in html


def test_calculate_and_message(client):
    r = client.post("/ui/calculate", data={"income": "100000", "months": "6", "quote": "oficial"})
    html = r.text
    assert "Ingreso mensual en Dólar Oficial: $100.00" in html
    assert "Fondo de Emergencia en Dólar Oficial: $600.00" in html
    assert "Necesitás ahorrar $600.00 para tener un fondo de emergencia de 6 meses." in html


def test_quote_change_after_result_recalculates(client):
    client.post("/ui/calculate", data={"income": "100000", "months": "6", "quote": "oficial"})
    html = client.post("/ui/quote", data={"income": "100000", "months": "6", "quote": "mep"}).text
    assert "Ingreso mensual en Dólar MEP: $200.00" in html
    assert "Fondo de Emergencia en Dólar MEP: $1200.00" in html


def test_quote_change_without_result_only_relabels(client):
    html = client.post("/ui/quote", data={"income": "100000", "months": "6", "quote": "blue"}).text
    assert "Ingreso mensual en Dólar Blue: $</p>" in html
    assert "Necesitás ahorrar" not in html


def test_invalid_input_shows_error_and_keeps_previous_result(client):
    client.post("/ui/calculate", data={"income": "100000", "months": "6", "quote": "oficial"})
    html = client.post("/ui/calculate", data={"income": "abc", "months": "6", "quote": "oficial"}).text
    assert "Ingresá valores numéricos válidos." in html
    assert "Fondo de Emergencia en Dólar Oficial: $600.00" in html


def test_rates_not_loaded_message(cold_client):
    html = cold_client.post(
        "/ui/calculate", data={"income": "100000", "months": "6", "quote": "oficial"}
    ).text
    assert "todavía no está disponible" in html
    assert "Necesitás ahorrar" not in html


def test_clear(client):
    client.post("/ui/calculate", data={"income": "100000", "months": "6", "quote": "blue"})
    html = client.post("/ui/clear").text
    assert 'name="income" value=""' in html
    assert "Necesitás ahorrar" not in html
    assert "Ingreso mensual en Dólar Oficial: $</p>" in html
