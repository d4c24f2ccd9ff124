"""
Pruebas de los endpoints HTTP contra una base SQLite temporal.
"""

from sqlalchemy import text

COROLLA = {"marca": "Toyota", "modelo": "Corolla", "ano": 2022, "cor": "blue"}
CLIENTE = {"nome": "Maria Souza", "cpf": 12345678901, "telefone": 11987654321}


def create_car(api_client, payload=COROLLA) -> int:
    response = api_client.post("/novo/carros", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def create_client(api_client, payload=CLIENTE) -> int:
    response = api_client.post("/novo/clientes", json=payload)
    assert response.status_code == 200
    return response.json()["id"]


def test_root_greeting(api_client):
    response = api_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"mensagem": "Olá, mundo!"}


def test_empty_lists(api_client):
    for path in ("/lista/carros", "/lista/clientes", "/lista/pedidos"):
        response = api_client.get(path)
        assert response.status_code == 200
        assert response.json() == []


def test_create_and_list_car(api_client):
    response = api_client.post("/novo/carros", json=COROLLA)
    assert response.status_code == 200
    body = response.json()
    assert body["mensagem"] == "Carro cadastrado com sucesso!"
    assert body["id"] > 0

    cars = api_client.get("/lista/carros").json()
    assert cars == [{"id_carro": body["id"], **COROLLA}]


def test_identifier_in_body_is_ignored_on_create(api_client):
    car_id = create_car(api_client, {**COROLLA, "id_carro": 777})
    assert car_id != 777


def test_update_and_delete_car(api_client):
    car_id = create_car(api_client)

    response = api_client.put(f"/atualizar/carros/{car_id}", json={**COROLLA, "cor": "prata"})
    assert response.status_code == 200
    assert response.json() == {"mensagem": "Carro atualizado com sucesso!"}
    assert api_client.get("/lista/carros").json()[0]["cor"] == "prata"

    response = api_client.delete(f"/delete/carros/{car_id}")
    assert response.status_code == 200
    assert response.json() == {"mensagem": "O carro foi removido com sucesso!"}
    assert api_client.get("/lista/carros").json() == []


def test_delete_missing_client_is_400(api_client):
    create_client(api_client)

    response = api_client.delete("/delete/clientes/9999")

    assert response.status_code == 400
    assert response.json()["mensagem"].startswith("Erro ao remover o cliente")
    assert len(api_client.get("/lista/clientes").json()) == 1


def test_update_missing_car_is_400(api_client):
    response = api_client.put("/atualizar/carros/9999", json=COROLLA)
    assert response.status_code == 400
    assert api_client.get("/lista/carros").json() == []


def test_client_numbers_are_returned_as_text(api_client):
    client_id = create_client(api_client)
    clients = api_client.get("/lista/clientes").json()
    assert clients == [
        {"id_cliente": client_id, "nome": "Maria Souza", "cpf": "12345678901", "telefone": "11987654321"}
    ]


def test_sales_order_flow(api_client):
    car_id = create_car(api_client)
    client_id = create_client(api_client)
    order = {"id_carro": car_id, "id_cliente": client_id, "data_pedido": "2024-01-01", "valor_pedido": 45000.00}

    response = api_client.post("/novo/pedido", json=order)
    assert response.status_code == 200
    order_id = response.json()["id"]

    orders = api_client.get("/lista/pedidos").json()
    assert orders == [{"id_pedido": order_id, **order}]
    assert isinstance(orders[0]["valor_pedido"], float)

    response = api_client.put(f"/atualizar/pedido/{order_id}", json={**order, "valor_pedido": 44000.5})
    assert response.status_code == 200
    assert api_client.get("/lista/pedidos").json()[0]["valor_pedido"] == 44000.5

    assert api_client.delete(f"/delete/pedido/{order_id}").status_code == 200
    assert api_client.delete(f"/delete/pedido/{order_id}").status_code == 400


def test_non_numeric_id_is_rejected_before_store(api_client):
    response = api_client.delete("/delete/carros/abc")
    assert response.status_code == 400
    body = response.json()
    assert body["mensagem"] == "ID inválido. Por favor, forneça um ID válido."
    assert body["campos"] == ["path.id_carro"]


def test_non_positive_id_is_rejected(api_client):
    response = api_client.put("/atualizar/pedido/0", json={
        "id_carro": 1, "id_cliente": 1, "data_pedido": "2024-01-01", "valor_pedido": 10.0,
    })
    assert response.status_code == 400
    assert response.json()["mensagem"].startswith("ID inválido")


def test_malformed_body_is_400(api_client):
    response = api_client.post("/novo/carros", json={"marca": "Fiat", "ano": "novo"})
    assert response.status_code == 400
    body = response.json()
    assert body["mensagem"].startswith("Dados inválidos")
    assert "body.modelo" in body["campos"]
    assert "body.ano" in body["campos"]


def test_list_failure_is_400(api_client):
    gateway = api_client.app.state.gateway
    api_client.portal.call(gateway.execute, text("DROP TABLE carro"))

    response = api_client.get("/lista/carros")
    assert response.status_code == 400
    assert response.json() == {"mensagem": "Não foi possível acessar a listagem de carros"}


def test_oversized_path_id_is_400(api_client):
    response = api_client.delete("/delete/carros/" + "9" * 25)
    assert response.status_code == 400
    assert response.json()["mensagem"].startswith("ID inválido")

    response = api_client.put("/atualizar/clientes/" + "9" * 25, json=CLIENTE)
    assert response.status_code == 400


def test_oversized_body_integer_is_400(api_client):
    response = api_client.post("/novo/carros", json={**COROLLA, "ano": 10**20})
    assert response.status_code == 400
    assert "body.ano" in response.json()["campos"]


def test_amount_with_three_decimals_is_400(api_client):
    response = api_client.post("/novo/pedido", json={
        "id_carro": 1, "id_cliente": 1, "data_pedido": "2024-01-01", "valor_pedido": 45000.125,
    })
    assert response.status_code == 400
    assert api_client.get("/lista/pedidos").json() == []


def test_camel_case_order_and_datetime_are_accepted(api_client):
    car_id = create_car(api_client)
    client_id = create_client(api_client)

    response = api_client.post("/novo/pedido", json={
        "idCarro": car_id, "idCliente": client_id, "dataPedido": "2024-01-01T10:30:00", "valorPedido": 45000.0,
    })

    assert response.status_code == 200
    orders = api_client.get("/lista/pedidos").json()
    assert orders == [{
        "id_pedido": response.json()["id"],
        "id_carro": car_id,
        "id_cliente": client_id,
        "data_pedido": "2024-01-01",
        "valor_pedido": 45000.0,
    }]


def test_car_ids_not_reused_after_delete(api_client):
    first = create_car(api_client)
    assert api_client.delete(f"/delete/carros/{first}").status_code == 200
    assert create_car(api_client) > first
