"""Tests for put_object and hash_object."""

import hashlib
import os
from unittest.mock import Mock

import pytest

from gitcas.compression import compress, decompress
from gitcas.errors import InvalidAlgorithmError, InvalidTypeError
from gitcas.git_object import create_git_object, parse_git_object
from gitcas.hashing import HashAlgorithm, sha1
from gitcas.path_mapping import hash_to_path
from gitcas.store import hash_object, put_object

from tests.helpers import DOC_BLOB, EMPTY_BLOB, HELLO_BLOB


class TestBasicStorage:
    """Objects are stored and named by hash."""

    def test_blob_bytes(self, storage):
        hash_value = put_object(storage, "blob", b"hello")
        assert len(hash_value) == 40
        assert all(c in "0123456789abcdef" for c in hash_value)

    def test_blob_str_content(self, storage):
        """str content is encoded as UTF-8."""
        assert put_object(storage, "blob", "hello") == HELLO_BLOB

    @pytest.mark.parametrize("obj_type", ["blob", "tree", "commit", "tag"])
    def test_all_types(self, storage, obj_type):
        hash_value = put_object(storage, obj_type, b"content")
        stored = decompress(storage.get(hash_to_path(hash_value)))
        assert stored.startswith(f"{obj_type} 7\x00".encode())


class TestHashVectors:
    """Hashes match git."""

    def test_empty_blob(self, storage):
        assert put_object(storage, "blob", b"") == EMPTY_BLOB

    def test_hello_blob(self, storage):
        assert put_object(storage, "blob", b"hello") == HELLO_BLOB

    def test_doc_blob(self, storage):
        assert put_object(storage, "blob", b"what is up, doc?") == DOC_BLOB

    def test_hash_of_framed_object(self, storage):
        """Hash covers header + content, not content alone."""
        hash_value = put_object(storage, "blob", b"hello")
        assert hash_value == sha1(create_git_object("blob", b"hello"))
        assert hash_value != sha1(b"hello")

    def test_different_content(self, storage):
        assert put_object(storage, "blob", b"a") != put_object(storage, "blob", b"b")

    def test_different_type(self, storage):
        assert put_object(storage, "blob", b"x") != put_object(storage, "tree", b"x")

    def test_sha256(self, storage):
        hash_value = put_object(storage, "blob", b"hello", algorithm=HashAlgorithm.SHA256)
        assert hash_value == hashlib.sha256(b"blob 5\x00hello").hexdigest()
        assert storage.exists(hash_to_path(hash_value))


class TestStoredBytes:
    """Stored representation is the compressed framed object."""

    def test_path(self, storage):
        hash_value = put_object(storage, "blob", b"hello")
        assert storage.paths() == [f"objects/{hash_value[:2]}/{hash_value[2:]}"]

    def test_zlib_format(self, storage):
        hash_value = put_object(storage, "blob", b"hello")
        stored = storage.get(hash_to_path(hash_value))
        assert stored[0] == 0x78

    def test_decompresses_to_framed_object(self, storage):
        hash_value = put_object(storage, "blob", b"hello")
        assert decompress(storage.get(hash_to_path(hash_value))) == b"blob 5\x00hello"

    def test_stored_hash_matches_path(self, storage):
        hash_value = put_object(storage, "commit", b"tree abc\n")
        framed = decompress(storage.get(hash_to_path(hash_value)))
        assert sha1(framed) == hash_value

    def test_parses(self, storage):
        hash_value = put_object(storage, "tag", b"object abc\n")
        obj = parse_git_object(decompress(storage.get(hash_to_path(hash_value))))
        assert obj.type == "tag"
        assert obj.content == b"object abc\n"

    def test_compression_level(self, storage):
        content = b"a" * 10000
        hash_value = put_object(storage, "blob", content, level=0)
        assert storage.get(hash_to_path(hash_value)) == compress(create_git_object("blob", content), 0)

    def test_highly_repetitive(self, storage):
        hash_value = put_object(storage, "blob", b"x" * 100000)
        assert len(storage.get(hash_to_path(hash_value))) < 1000


class TestInvalidType:
    """Type validated before anything is written."""

    @pytest.mark.parametrize("obj_type", ["invalid", "", "blob ", "blob\x00", "BLOB"])
    def test_rejected(self, spy_storage, obj_type):
        with pytest.raises(InvalidTypeError, match="type"):
            put_object(spy_storage, obj_type, b"content")
        spy_storage.write.assert_not_called()


class TestEdgeCases:
    """Unusual content."""

    @pytest.mark.parametrize("content", [
        b"",
        b"a",
        b"\x00\x00\x00",
        bytes(range(256)),
        b"\x78\x9c\x00\x00",
        "日本語".encode(),
    ])
    def test_content_roundtrips(self, storage, content):
        hash_value = put_object(storage, "blob", content)
        framed = decompress(storage.get(hash_to_path(hash_value)))
        assert parse_git_object(framed).content == content

    def test_large_content(self, storage):
        content = os.urandom(2 * 1024 * 1024)
        hash_value = put_object(storage, "blob", content)
        framed = decompress(storage.get(hash_to_path(hash_value)))
        assert framed == create_git_object("blob", content)


class TestStorageInterface:
    """Exactly one backend write; failures propagate."""

    def test_one_write(self, spy_storage):
        put_object(spy_storage, "blob", b"hello")
        assert spy_storage.write.call_count == 1
        spy_storage.get.assert_not_called()
        spy_storage.exists.assert_not_called()

    def test_write_arguments(self, spy_storage):
        hash_value = put_object(spy_storage, "blob", b"hello")
        path, data = spy_storage.write.call_args.args
        assert path == hash_to_path(hash_value)
        assert isinstance(data, bytes)
        assert decompress(data) == b"blob 5\x00hello"

    def test_backend_error_propagates_unchanged(self):
        error = OSError("Storage write failed")
        failing = Mock()
        failing.write.side_effect = error

        with pytest.raises(OSError, match="Storage write failed") as exc_info:
            put_object(failing, "blob", b"hello")
        assert exc_info.value is error


class TestIdempotency:
    """Same input, same output."""

    def test_same_hash_and_bytes(self, spy_storage):
        first = put_object(spy_storage, "blob", b"same")
        second = put_object(spy_storage, "blob", b"same")
        assert first == second
        calls = spy_storage.write.call_args_list
        assert calls[0] == calls[1]

    def test_overwrite_is_not_an_error(self, storage):
        put_object(storage, "blob", b"same")
        put_object(storage, "blob", b"same")
        assert storage.size() == 1


class TestHashObject:
    """Hash without storing."""

    def test_matches_put(self, storage):
        assert hash_object("blob", b"hello") == put_object(storage, "blob", b"hello")

    def test_vector(self):
        assert hash_object("blob", b"") == EMPTY_BLOB

    def test_sha256(self):
        assert hash_object("blob", b"hello", algorithm="sha256") == hashlib.sha256(b"blob 5\x00hello").hexdigest()

    def test_invalid_type(self):
        with pytest.raises(InvalidTypeError):
            hash_object("nope", b"")

    def test_unknown_algorithm(self):
        with pytest.raises(InvalidAlgorithmError):
            hash_object("blob", b"", algorithm="md5")


class TestInvalidAlgorithm:
    """Algorithm validated before anything is written."""

    def test_rejected(self, spy_storage):
        with pytest.raises(InvalidAlgorithmError, match="md5"):
            put_object(spy_storage, "blob", b"content", algorithm="md5")
        spy_storage.write.assert_not_called()
