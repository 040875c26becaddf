# Event/error codes for the redirect_url Lambda
INVALID_INPUT = 'INVALID_INPUT'
SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
REDIRECT_SUCCESS = 'REDIRECT_SUCCESS'
