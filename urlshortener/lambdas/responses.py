import json

from urlshortener.types import LambdaResponse


def response_error(status_code: int, message: str, error_code: str | None = None) -> LambdaResponse:
    body = {'message': message}
    if error_code:
        body['errorCode'] = error_code
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body),
    }


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    return response_error(400, base if not message else f'{base} ({message})', error_code)


def response_404(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Not Found'
    return response_error(404, base if not message else f'{base} ({message})', error_code)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    return response_error(500, base if not message else f'{base} ({message})', error_code)


def response_503(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Service Unavailable'
    return response_error(503, base if not message else f'{base} ({message})', error_code)


def response_200_text(body: str) -> LambdaResponse:
    return {
        'statusCode': 200,
        'headers': {'Content-Type': 'text/plain'},
        'body': body,
    }


def response_redirect(*, location: str, status_code: int) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {'location': location},
        'body': '',  # no body needed for redirects
    }
