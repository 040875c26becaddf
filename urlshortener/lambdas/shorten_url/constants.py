# Event/error codes for the shorten_url Lambda
INVALID_INPUT = 'INVALID_INPUT'
IDENTIFIER_COLLISION = 'IDENTIFIER_COLLISION'
STORE_UNAVAILABLE = 'STORE_UNAVAILABLE'
CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
SHORTEN_SUCCESS = 'SHORTEN_SUCCESS'
