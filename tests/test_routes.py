"""Integration tests for routes."""


def test_home_page(client):
    """Home page is accessible without certificate."""
    response = client.get("/")
    assert response.is_success
    assert "Dungeon" in response.body


def test_play_requires_cert(client):
    """Play page requires a client certificate."""
    response = client.get("/play")
    assert response.is_certificate_required


def test_play_with_cert(auth_client):
    """Play page shows the opening narration and the directions."""
    response = auth_client.get("/play")
    assert response.is_success
    assert "Welcome Adventurer" in response.body
    assert "/act/1 left" in response.body


def test_act_by_number(auth_client):
    """Choosing the first action at the entrance enters the key room."""
    response = auth_client.get("/act/1")
    assert response.is_success
    assert "Opening the door" in response.body
    assert "Open the drawer" in response.body


def test_act_out_of_range(auth_client):
    response = auth_client.get("/act/9")
    assert response.is_success
    assert "do that here" in response.body


def test_act_not_a_number(auth_client):
    response = auth_client.get("/act/left")
    assert response.is_success
    assert "do that here" in response.body


def test_cmd_input_prompt(auth_client):
    """The /cmd route prompts for input when no query."""
    response = auth_client.get("/cmd")
    assert response.is_input_required


def test_cmd_with_input(auth_client):
    """The /cmd route performs typed actions."""
    response = auth_client.get_input("/cmd", "forward")
    assert response.is_success
    assert "air current" in response.body


def test_cmd_illegal_input(auth_client):
    response = auth_client.get_input("/cmd", "dance")
    assert response.is_success
    assert "do that here" in response.body


def test_inventory_route(auth_client):
    """The /inventory route shows inventory."""
    response = auth_client.get("/inventory")
    assert response.is_success
    assert "carrying" in response.body.lower()


def test_inventory_after_pickup(auth_client):
    auth_client.get("/act/1")
    auth_client.get("/act/1")
    response = auth_client.get("/inventory")
    assert "Small Key" in response.body


def test_help_page(client):
    """Help page is accessible."""
    response = client.get("/help")
    assert response.is_success
    assert "forward" in response.body


def test_about_page(client):
    """About page is accessible."""
    response = client.get("/about")
    assert response.is_success
    assert "Dungeon" in response.body


def test_new_game_prompt(auth_client):
    """The /new route prompts for confirmation."""
    response = auth_client.get("/new")
    assert response.is_input_required


def test_new_game_confirmed(auth_client):
    auth_client.get("/act/2")
    response = auth_client.get_input("/new", "yes")
    assert response.is_success
    assert "A new adventure begins!" in response.body
    assert "Welcome Adventurer" in response.body


def test_dead_player_cannot_act(auth_client):
    # forward, forward, run for the door, forward, run again
    for choice in ("2", "2", "1", "2", "1"):
        response = auth_client.get(f"/act/{choice}")
    assert "Game Over" in response.body
    response = auth_client.get("/act/1")
    assert "The game is over" in response.body
