"""Category browsing over the BasicCategory hierarchy."""

from urllib.parse import quote

from categories import catalog, service
from commands.legacy_categories import legacy_category_name


def test_category_titles_by_position(client):
    response = client.get("/api/categories")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "data": ["Files & Folders", "One-liners", "Custom Stuff"],
        "message": None,
    }


def test_detailed_categories(client):
    data = client.get("/api/categories/detailed").json()["data"]

    assert data == [
        {"id": 2, "title": "Files & Folders", "position": 0, "description": "File and directory operations"},
        {"id": 1, "title": "One-liners", "position": 1, "description": "Useful linux command line one liners"},
        {"id": 3, "title": "Custom Stuff", "position": 2},
    ]


def test_commands_by_category_uses_first_line_and_group_description(client):
    response = client.get(f"/api/category/{quote('Files & Folders')}")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] is None
    assert body["data"] == [
        {"id": 3, "name": "du -sh *", "category": "Other", "description": "List files"},
        {"id": 2, "name": "cp -r src dst", "category": "Other", "description": "Copy files"},
        {"id": 1, "name": "ls -la", "category": "Other", "description": "List files"},
    ]


def test_unknown_category_is_soft_miss(client):
    response = client.get("/api/category/Nope")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [], "message": "Category 'Nope' not found"}


def test_category_title_with_slash_is_soft_miss(client):
    response = client.get("/api/category/a%2Fb")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [], "message": "Category 'a/b' not found"}


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/no-such-endpoint")

    assert response.status_code == 404
    assert response.json() == {"success": False, "data": None, "message": "Not Found"}


def test_wrong_method_uses_envelope(client):
    response = client.post("/api/categories")

    assert response.status_code == 405
    assert response.json()["success"] is False
    assert response.json()["data"] is None


def test_category_lookup_is_exact(client):
    body = client.get("/api/category/one-liners").json()

    assert body["data"] == []
    assert body["message"] is not None


def test_display_name():
    assert service.display_name("ls -la\n# lists all files") == "ls -la"
    assert service.display_name("  tar xzf a.tgz  ") == "tar xzf a.tgz"
    assert service.display_name("") == ""
    assert service.display_name(None) == ""
    assert service.display_name("cat a\r\nb") == "cat a"
    assert service.display_name("printf 'a\x0cb'\nsecond") == "printf 'a\x0cb'"
    assert service.display_name("echo \u2028 x") == "echo \u2028 x"


def test_presentation_maps():
    assert legacy_category_name(19) == "VIM Texteditor"
    assert legacy_category_name(0) == "Other"
    assert legacy_category_name(24) == "Other"
    assert catalog.description_for("GIT") == "Git version control commands"
    assert catalog.description_for("Unknown") is None
