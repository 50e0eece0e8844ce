import json
from dataclasses import dataclass

import pytest

from utilbox.kms import (
    DecryptRequest,
    DecryptResponse,
    EncryptRequest,
    EncryptResponse,
    KmsService,
    Resource,
)


class ReversingService(KmsService):
    def encrypt(self, request):
        request.validate()
        data = request.resource.data[::-1]
        return EncryptResponse(encrypted_data=data, encrypted_text=data.decode())

    def decrypt(self, request):
        request.validate()
        data = request.resource.data[::-1]
        return DecryptResponse(data=data, text=data.decode())


@dataclass
class Config:
    aaa: str = ""
    bbb: str = ""


def test_encrypt_validate_errors():
    with pytest.raises(ValueError, match="key was empty"):
        EncryptRequest(resource=Resource()).validate()
    with pytest.raises(ValueError, match="nothing to encrypt"):
        EncryptRequest(key="k").validate()


def test_decrypt_validate_errors():
    with pytest.raises(ValueError, match="key was empty"):
        DecryptRequest(resource=Resource()).validate()
    with pytest.raises(ValueError, match="nothing to decrypt"):
        DecryptRequest(key="k").validate()


def test_round_trip():
    service = ReversingService()
    plain = b"hello data"
    encrypted = service.encrypt(EncryptRequest(key="k", resource=Resource(data=plain)))
    decrypted = service.decrypt(DecryptRequest(key="k", resource=Resource(data=encrypted.encrypted_data)))
    assert decrypted.data == plain


def _request(payload):
    raw = json.dumps(payload).encode()[::-1]
    return DecryptRequest(key="k", resource=Resource(data=raw))


def test_decode_into_dict():
    target = {}
    result = ReversingService().decode(_request({"aaa": "Test1"}), json.loads, target)
    assert result is target
    assert target == {"aaa": "Test1"}


def test_decode_into_object():
    config = Config()
    ReversingService().decode(_request({"aaa": "Test1", "bbb": "test2", "zzz": 1}), json.loads, config)
    assert config == Config("Test1", "test2")


def test_decode_without_target():
    assert ReversingService().decode(_request([1, 2]), json.loads) == [1, 2]


def test_abstract_service():
    with pytest.raises(TypeError):
        KmsService()