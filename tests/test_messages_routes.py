"""
Tests for direct messages.
"""


def test_send_and_list_messages(client, register):
    ana, ana_headers = register()
    bruno, bruno_headers = register(email="bruno@example.com", username="bruno", firstName="Bruno")

    response = client.post(
        "/api/messages",
        json={"receiverId": ana["id"], "content": "Oi Ana!"},
        headers=bruno_headers,
    )

    assert response.status_code == 201
    message = response.json()["message"]
    assert message["senderId"] == bruno["id"]
    assert message["receiverId"] == ana["id"]
    assert message["content"] == "Oi Ana!"
    assert message["createdAt"]
    assert message["senderUsername"] == "bruno"

    listed = client.get(f"/api/messages/{ana['id']}", headers=ana_headers).json()["messages"]
    assert len(listed) == 1
    assert listed[0]["id"] == message["id"]
    assert listed[0]["senderFirstName"] == "Bruno"
    assert listed[0]["senderLastName"] == "Souza"
    assert listed[0]["senderAvatar"] is None


def test_messages_are_listed_newest_first(client, register):
    ana, ana_headers = register()
    _, bruno_headers = register(email="bruno@example.com", username="bruno")

    for content in ["primeiro", "segundo", "terceiro"]:
        client.post("/api/messages", json={"receiverId": ana["id"], "content": content}, headers=bruno_headers)

    listed = client.get(f"/api/messages/{ana['id']}", headers=ana_headers).json()["messages"]

    assert [m["content"] for m in listed] == ["terceiro", "segundo", "primeiro"]


def test_only_received_messages_are_listed(client, register):
    ana, ana_headers = register()
    bruno, bruno_headers = register(email="bruno@example.com", username="bruno")
    client.post("/api/messages", json={"receiverId": bruno["id"], "content": "para o Bruno"}, headers=ana_headers)

    assert client.get(f"/api/messages/{ana['id']}", headers=ana_headers).json() == {"messages": []}


def test_unknown_receiver_is_not_found(client, register):
    _, headers = register()

    response = client.post("/api/messages", json={"receiverId": 9999, "content": "Oi"}, headers=headers)

    assert response.status_code == 404


def test_empty_content_is_rejected(client, register):
    ana, headers = register()

    response = client.post("/api/messages", json={"receiverId": ana["id"], "content": ""}, headers=headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Dados inválidos"


def test_messages_require_token(client):
    assert client.post("/api/messages", json={"receiverId": 1, "content": "Oi"}).status_code == 401
    assert client.get("/api/messages/1").status_code == 401
