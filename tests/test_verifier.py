import pytest

from apitest.verifier import DefaultVerifier, NoopVerifier, Verifier, new_default_verifier


def test_new_default_verifier():
    verifier = new_default_verifier()
    assert isinstance(verifier, DefaultVerifier)
    assert isinstance(verifier, Verifier)


def test_verifier_is_abstract():
    with pytest.raises(TypeError):
        Verifier()


def test_equal_passes(mock_t, verifier):
    assert verifier.equal(mock_t, {'a': [1, 2]}, {'a': [1, 2]})
    assert mock_t.calls == 0


def test_equal_reports_one_failure(mock_t, verifier):
    assert not verifier.equal(mock_t, 1, 2)
    assert mock_t.error_calls == 1
    assert mock_t.fatal_calls == 0
    assert 'Not equal' in mock_t.errors[0]


def test_equal_includes_custom_message(mock_t, verifier):
    assert not verifier.equal(mock_t, 'a', 'b', 'header %s mismatch', 'X-Id')
    assert 'header X-Id mismatch' in mock_t.errors[0]


def test_failure_with_non_format_message_args(mock_t, verifier):
    assert not verifier.equal(mock_t, 1, 2, 'status mismatch', 404)
    assert not verifier.no_error(mock_t, ValueError('boom'), '100% of %s', 'calls')
    assert mock_t.error_calls == 2
    assert 'status mismatch 404' in mock_t.errors[0]
    assert '100% of %s calls' in mock_t.errors[1]


def test_json_eq_ignores_key_order_and_whitespace(mock_t, verifier):
    assert verifier.json_eq(mock_t, '{"a":1,"b":2}', '{"b":2,"a":1}')
    assert verifier.json_eq(mock_t, '{"a": [1, {"c": null}]}', '{ "a" : [ 1 , { "c" : null } ] }')
    assert mock_t.calls == 0


@pytest.mark.parametrize('expected, actual', [
    ('{"a": 1}', '{"a": true}'),
    ('[0]', '[false]'),
])
def test_json_eq_bool_is_not_number(mock_t, verifier, expected, actual):
    assert not verifier.json_eq(mock_t, expected, actual)
    assert mock_t.error_calls == 1


def test_json_eq_reports_mismatch(mock_t, verifier):
    assert not verifier.json_eq(mock_t, '{"a":1}', '{"a":2}')
    assert mock_t.error_calls == 1


@pytest.mark.parametrize('expected, actual, message', [
    ('not json', '{}', 'is not valid json'),
    ('{}', 'not json', 'needs to be valid json'),
])
def test_json_eq_reports_invalid_json(mock_t, verifier, expected, actual, message):
    assert not verifier.json_eq(mock_t, expected, actual)
    assert mock_t.error_calls == 1
    assert message in mock_t.errors[0]


def test_fail(mock_t, verifier):
    assert not verifier.fail(mock_t, 'something went wrong')
    assert mock_t.error_calls == 1
    assert 'something went wrong' in mock_t.errors[0]


def test_no_error(mock_t, verifier):
    assert verifier.no_error(mock_t, None)
    assert mock_t.calls == 0

    assert not verifier.no_error(mock_t, ValueError('boom'))
    assert mock_t.error_calls == 1
    assert 'Received unexpected error:\nboom' in mock_t.errors[0]


def test_noop_verifier_never_reports(mock_t):
    verifier = NoopVerifier()

    assert verifier.equal(mock_t, 1, 2)
    assert verifier.equal(mock_t, 1, 2, 'message %s', 'arg')
    assert verifier.json_eq(mock_t, '{}', 'not json')
    assert verifier.fail(mock_t, 'failure')
    assert mock_t.calls == 0


def test_noop_verifier_no_error_ignores_error(mock_t):
    # no_error passes even when an error is present, the noop verifier never inspects its arguments
    assert NoopVerifier().no_error(mock_t, ValueError('boom'))
    assert mock_t.calls == 0


class CustomVerifier(Verifier):

    def __init__(self):
        self.checked = []

    def equal(self, t, expected, actual, *msg_and_args):
        self.checked.append((expected, actual))
        return expected == actual

    def json_eq(self, t, expected, actual, *msg_and_args):
        return True

    def fail(self, t, failure_message, *msg_and_args):
        return False

    def no_error(self, t, err, *msg_and_args):
        return err is None


def test_custom_verifier(mock_t):
    verifier = CustomVerifier()
    assert verifier.equal(mock_t, 1, 1)
    assert not verifier.fail(mock_t, 'failure')
    assert verifier.checked == [(1, 1)]
