import pytest
from starlette.requests import Request
from fastapi.responses import JSONResponse, Response

from amaru_api.services.validation import parse_fecha, parse_id, try_parse_id
from amaru_api.utils.errors import BadRequestError, NotFoundError, service_operation
from amaru_api.utils.responses import envelope_message, wrap_response


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "1.5", "", "١٢", "2147483648", "99999999999999999999", 2**31])
def test_parse_id_rejects_malformed(raw):
    with pytest.raises(BadRequestError):
        parse_id(raw)


def test_parse_id_accepts_digits():
    assert parse_id("42") == 42
    assert parse_id(str(2**31 - 1)) == 2**31 - 1
    assert parse_id(7) == 7
    assert try_parse_id("x") is None
    assert try_parse_id(None) is None


def test_parse_fecha():
    assert parse_fecha("2030-01-01").year == 2030
    assert parse_fecha("2030-01-01T05:00:00Z").tzinfo is None
    assert parse_fecha("mañana") is None


def test_envelope_messages():
    assert envelope_message("POST", "/api/talleres") == "Creado exitosamente"
    assert envelope_message("PATCH", "/api/categorias/1/desactivar") == "Desactivado exitosamente"
    assert envelope_message("PATCH", "/api/talleres/1/estado") == "Estado cambiado exitosamente"
    assert envelope_message("DELETE", "/api/talleres/1") == "Eliminado exitosamente"


def _request(method="GET", path="/api/x"):
    return Request({"type": "http", "method": method, "path": path, "headers": [], "query_string": b""})


def test_wrap_response_passes_through_shaped_and_empty():
    shaped = JSONResponse({"success": True, "message": "ok"})
    assert wrap_response(_request(), shaped) is shaped

    empty = Response(status_code=204)
    assert wrap_response(_request("DELETE"), empty) is empty

    wrapped = wrap_response(_request(), JSONResponse([1, 2]))
    assert b'"data":[1,2]' in wrapped.body


class FakeSession:
    def __init__(self):
        self.rolled_back = 0

    def rollback(self):
        self.rolled_back += 1


def test_service_operation_wraps_unexpected_errors():
    @service_operation
    def boom(db):
        raise RuntimeError("disk full")

    db = FakeSession()
    with pytest.raises(BadRequestError) as info:
        boom(db)
    assert info.value.detail == "disk full"
    assert db.rolled_back == 1


def test_service_operation_keeps_service_errors():
    @service_operation
    def missing(db):
        raise NotFoundError("no está")

    with pytest.raises(NotFoundError):
        missing(FakeSession())
