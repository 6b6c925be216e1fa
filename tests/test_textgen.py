from unittest.mock import MagicMock, patch

import pytest


pytestmark = pytest.mark.api


def _model_returning(text):
    response = MagicMock()
    response.text = text
    model = MagicMock()
    model.generate_content.return_value = response
    return model


@patch("catalog.services.textgen.genai")
def test_generate_text_success(mock_genai, client, app):
    model = _model_returning("  Once upon a time...  ")
    mock_genai.GenerativeModel.return_value = model

    response = client.post("/generate-text", json={"prompt": "Tell me a story", "max_tokens": 50})

    assert response.status_code == 200
    assert response.get_json() == {
        "prompt": "Tell me a story",
        "text": "Once upon a time...",
        "model": app.config["GENAI_MODEL"],
    }
    mock_genai.configure.assert_called_once_with(api_key="test-google-key")
    mock_genai.GenerativeModel.assert_called_once_with(app.config["GENAI_MODEL"])
    model.generate_content.assert_called_once_with(
        "Tell me a story",
        generation_config={"max_output_tokens": 50, "temperature": 0.7},
    )


@patch("catalog.services.textgen.genai")
def test_genai_is_configured_once(mock_genai, client):
    mock_genai.GenerativeModel.return_value = _model_returning("ok")

    client.post("/generate-text", json={"prompt": "a"})
    client.post("/generate-text", json={"prompt": "b"})

    assert mock_genai.configure.call_count == 1


@pytest.mark.parametrize(
    "payload, field",
    [
        ({}, "prompt"),
        ({"prompt": "   "}, "prompt"),
        ({"prompt": 42}, "prompt"),
        ({"prompt": "x" * 4001}, "prompt"),
        ({"prompt": "hi", "max_tokens": 0}, "max_tokens"),
        ({"prompt": "hi", "max_tokens": "10"}, "max_tokens"),
        ({"prompt": "hi", "temperature": 3}, "temperature"),
        ({"prompt": "hi", "temperature": True}, "temperature"),
    ],
)
@patch("catalog.services.textgen.genai")
def test_generate_text_validation(mock_genai, client, payload, field):
    response = client.post("/generate-text", json=payload)

    assert response.status_code == 400
    assert field in response.get_json()["error"]["details"]
    mock_genai.GenerativeModel.assert_not_called()


def test_generate_text_without_api_key_is_503(client, app):
    app.config["GOOGLE_API_KEY"] = None
    response = client.post("/generate-text", json={"prompt": "hi"})
    assert response.status_code == 503


@patch("catalog.services.textgen.genai")
def test_provider_failure_is_502(mock_genai, client):
    model = MagicMock()
    model.generate_content.side_effect = RuntimeError("quota exceeded")
    mock_genai.GenerativeModel.return_value = model

    response = client.post("/generate-text", json={"prompt": "hi"})

    assert response.status_code == 502
    assert response.get_json()["error"]["code"] == "upstream_error"


@patch("catalog.services.textgen.genai")
def test_empty_generation_is_502(mock_genai, client):
    mock_genai.GenerativeModel.return_value = _model_returning("   ")
    response = client.post("/generate-text", json={"prompt": "hi"})
    assert response.status_code == 502
