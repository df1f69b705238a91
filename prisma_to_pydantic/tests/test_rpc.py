import io
import json
from pathlib import Path

import pytest

from prisma_to_pydantic import rpc

BLOG_DMMF = Path(__file__).parent / "test_data" / "dmmf" / "blog.dmmf.json"


def generate_request(output, config=None, request_id=2):
    with open(BLOG_DMMF) as f:
        dmmf = json.load(f)
    return {
        "jsonrpc": "2.0",
        "method": "generate",
        "id": request_id,
        "params": {
            "generator": {
                "name": "pydantic",
                "provider": {"value": "prisma-pydantic-generator", "fromEnvVar": None},
                "output": {"value": str(output), "fromEnvVar": None},
                "config": config or {},
            },
            "dmmf": dmmf,
        },
    }


@pytest.mark.parametrize("value,expected", [("true", True), ("TRUE", True), (" True ", True), ("false", False), ("1", False), ("", False)])
def test_is_enabled(value, expected):
    assert rpc.is_enabled({"GENERATE_PYTHON": value}) is expected


def test_is_enabled_when_unset():
    assert rpc.is_enabled({}) is False


def test_get_manifest():
    response = rpc.handle_request({"jsonrpc": "2.0", "method": "getManifest", "params": {}, "id": 1})

    assert response == {
        "jsonrpc": "2.0",
        "id": 1,
        "result": {"manifest": {"prettyName": "Prisma Pydantic Generator", "defaultOutput": "./generated/prisma_models"}},
    }


def test_generate_enabled(tmp_path):
    out = tmp_path / "models"

    response = rpc.handle_request(generate_request(out), environ={"GENERATE_PYTHON": "true"})

    assert response == {"jsonrpc": "2.0", "id": 2, "result": None}
    assert (out / "user.py").exists()
    assert (out / "post.py").exists()


def test_generate_disabled(tmp_path):
    out = tmp_path / "models"

    response = rpc.handle_request(generate_request(out), environ={})

    assert response["result"] is None
    assert not out.exists()


def test_generator_block_config(tmp_path):
    out = tmp_path / "models"

    rpc.handle_request(generate_request(out, {"enumsModule": "choices", "writePyTyped": "false"}), environ={"GENERATE_PYTHON": "true"})

    assert (out / "choices.py").exists()
    assert not (out / "py.typed").exists()


def test_generate_without_output_is_an_error():
    request = generate_request("")
    request["params"]["generator"]["output"] = None

    response = rpc.handle_request(request, environ={"GENERATE_PYTHON": "true"})

    assert response["error"]["code"] == rpc.GENERATION_FAILED
    assert "No output directory" in response["error"]["message"]


def test_unknown_method():
    response = rpc.handle_request({"jsonrpc": "2.0", "method": "shutdown", "id": 9})

    assert response["error"]["code"] == rpc.METHOD_NOT_FOUND
    assert response["id"] == 9


@pytest.mark.parametrize("request_value", [[], 1, "generate", None])
def test_request_that_is_not_an_object(request_value):
    response = rpc.handle_request(request_value)

    assert response["error"]["code"] == rpc.INVALID_REQUEST
    assert response["id"] is None


def test_unexpected_generation_error_is_reported(tmp_path, monkeypatch):
    def broken_parse(dmmf):
        raise TypeError("unexpected node")

    monkeypatch.setattr(rpc, "parse_datamodel", broken_parse)

    response = rpc.handle_request(generate_request(tmp_path / "models"), environ={"GENERATE_PYTHON": "true"})

    assert response["id"] == 2
    assert response["error"]["code"] == rpc.GENERATION_FAILED
    assert response["error"]["data"] == {"type": "TypeError"}


def test_non_string_model_name_is_reported(tmp_path):
    request = generate_request(tmp_path / "models")
    request["params"]["dmmf"]["datamodel"]["models"][0]["name"] = 42

    response = rpc.handle_request(request, environ={"GENERATE_PYTHON": "true"})

    assert response["error"]["code"] == rpc.GENERATION_FAILED
    assert response["error"]["data"] == {"type": "SchemaParseError"}


def test_serve_keeps_going_after_bad_requests(tmp_path):
    stdin = io.StringIO("[]\n1\n" + json.dumps({"jsonrpc": "2.0", "method": "getManifest", "params": {}, "id": 5}) + "\n")
    stderr = io.StringIO()

    rpc.serve(stdin, stderr, environ={})

    responses = [json.loads(line) for line in stderr.getvalue().splitlines()]
    assert [r.get("error", {}).get("code") for r in responses] == [rpc.INVALID_REQUEST, rpc.INVALID_REQUEST, None]
    assert responses[2]["id"] == 5


def test_serve(tmp_path):
    out = tmp_path / "models"
    requests = [
        {"jsonrpc": "2.0", "method": "getManifest", "params": {}, "id": 1},
        generate_request(out),
    ]
    stdin = io.StringIO("\n".join(json.dumps(r) for r in requests) + "\n\nnot json\n")
    stderr = io.StringIO()

    rpc.serve(stdin, stderr, environ={"GENERATE_PYTHON": "true"})

    responses = [json.loads(line) for line in stderr.getvalue().splitlines()]
    assert [r["id"] for r in responses] == [1, 2]
    assert responses[1]["result"] is None
    assert (out / "__init__.py").exists()
