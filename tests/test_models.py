"""
Unit tests for input models and validation.
"""
import pytest
from pydantic import ValidationError

from bundling.errors import BundleInputError
from bundling.models import BundleRequest, SourceFile, coerce_files


class TestSourceFile:

    def test_is_immutable(self):
        f = SourceFile(name="a.c", content="int a;")
        with pytest.raises(ValidationError):
            f.content = "changed"


class TestCoerceFiles:

    def test_mixed_records(self):
        existing = SourceFile(name="a.c", content="")
        result = coerce_files([existing, {"name": "b.c", "content": "int b;"}])
        assert result[0] is existing
        assert result[1] == SourceFile(name="b.c", content="int b;")

    def test_generator_is_accepted(self):
        result = coerce_files({"name": f"{i}.c", "content": ""} for i in range(3))
        assert [f.name for f in result] == ["0.c", "1.c", "2.c"]

    def test_empty(self):
        assert coerce_files([]) == []

    @pytest.mark.parametrize("bad", [None, "a.c", b"a.c", {"name": "a.c", "content": ""}, 3])
    def test_not_a_sequence(self, bad):
        with pytest.raises(BundleInputError):
            coerce_files(bad)

    def test_bad_record_names_its_position(self):
        with pytest.raises(BundleInputError) as exc:
            coerce_files([{"name": "a.c", "content": ""}, {"content": "x"}])
        assert "File #1" in str(exc.value)


class TestBundleRequest:

    def test_defaults(self):
        request = BundleRequest()
        assert request.language == ""
        assert request.version is None
        assert request.stdin is None
        assert request.files == []
