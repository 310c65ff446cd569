import pytest

import ecmauri
from ecmauri import errors


class TestMalformedEscapeError:
    def test_attributes(self):
        ex = errors.MalformedEscapeError('ab%G1', 2, 'bad digits')

        assert ex.encoded == 'ab%G1'
        assert ex.position == 2
        assert ex.reason == 'bad digits'
        assert ex.args == ('ab%G1', 2, 'bad digits')

    def test_str(self):
        ex = errors.MalformedEscapeError('ab%G1', 2, 'bad digits')
        assert str(ex) == "Malformed percent-escape at position 2: bad digits (near '%G1')"

    def test_str_truncates_context(self):
        encoded = 'x%C0' + 'a' * 50
        ex = errors.MalformedEscapeError(encoded, 1, 'invalid UTF-8')
        assert repr(encoded[1:13]) in str(ex)

    @pytest.mark.parametrize(
        'base', [ecmauri.URIError, ValueError, Exception]
    )
    def test_hierarchy(self, base):
        assert issubclass(errors.MalformedEscapeError, base)

    def test_raised_by_decode(self):
        with pytest.raises(ecmauri.URIError) as excinfo:
            ecmauri.uri.decode('%C0%80')

        assert 'position 0' in str(excinfo.value)


class TestUnknownOperationError:
    def test_without_choices(self):
        ex = errors.UnknownOperationError('escape')
        assert str(ex) == "Unknown operation: 'escape'"
        assert ex.available == ()

    def test_with_choices(self):
        ex = errors.UnknownOperationError('escape', ('decodeURI', 'encodeURI'))
        assert str(ex) == (
            "Unknown operation: 'escape' (expected one of: decodeURI, encodeURI)"
        )

    def test_hierarchy(self):
        assert issubclass(errors.UnknownOperationError, ecmauri.URIError)
        assert issubclass(errors.UnknownOperationError, LookupError)
