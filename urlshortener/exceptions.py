class UrlShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:url_shortener_error'


class ConfigurationError(UrlShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class ServiceError(UrlShortenerError):
    """Base exception for shortener/redirector failures."""

    error_code = 'service:service_error'


class InvalidInputError(ServiceError):
    """Raised when a request field is missing or malformed.

    Not retryable: the caller must fix the input.
    """

    error_code = 'service:invalid_input_error'


class IdentifierCollisionError(ServiceError):
    """Raised when a generated shortcode is already taken.

    Retryable: the caller may resubmit, which generates a fresh shortcode.
    """

    error_code = 'service:identifier_collision_error'
