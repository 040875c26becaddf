import json

from urlshortener.lambdas.responses import (
    response_200_text,
    response_400,
    response_404,
    response_500,
    response_503,
    response_redirect,
)


def test_response_200_text() -> None:
    assert response_200_text('https://sho.rt/abcde') == {
        'statusCode': 200,
        'headers': {'Content-Type': 'text/plain'},
        'body': 'https://sho.rt/abcde',
    }


def test_response_redirect() -> None:
    assert response_redirect(location='https://example.com', status_code=308) == {
        'statusCode': 308,
        'headers': {'location': 'https://example.com'},
        'body': '',
    }


def test_error_responses_without_message() -> None:
    for response, status, message in [
        (response_400(), 400, 'Bad Request'),
        (response_404(), 404, 'Not Found'),
        (response_500(), 500, 'Internal Server Error'),
        (response_503(), 503, 'Service Unavailable'),
    ]:
        assert response['statusCode'] == status
        assert response['headers'] == {'Content-Type': 'application/json'}
        assert json.loads(response['body']) == {'message': message}


def test_error_response_with_message_and_code() -> None:
    response = response_503(message='record store unavailable', error_code='STORE_UNAVAILABLE')

    assert json.loads(response['body']) == {
        'message': 'Service Unavailable (record store unavailable)',
        'errorCode': 'STORE_UNAVAILABLE',
    }
