from fastapi.testclient import TestClient
from app.main import app


client = TestClient(app)


def test_openapi_docs_lists_recipe_endpoints():
    response = client.get("/openapi.json")
    assert response.status_code == 200
    data = response.json()

    paths = data.get("paths", {})
    assert "post" in paths["/api/get-recipes"]
    assert "post" in paths["/api/expiring-recipes"]
    assert "post" in paths["/api/recognize-ingredients"]
    assert "post" in paths["/api/substitutions/resolve"]
    assert "get" in paths["/api/substitutions"]
    assert "get" in paths["/api/waste-prone"]
